"""Company account and company-info endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Query, Response, status

from src.hirehub.api.dependencies import (
    CompanyServiceDep,
    CurrentCompany,
    ExpectedVersion,
    ProjectServiceDep,
    set_etag,
)
from src.hirehub.core.config import get_settings
from src.hirehub.schemas.company import (
    CompanyCreate,
    CompanyInfoCreate,
    CompanyInfoRead,
    CompanyRead,
)
from src.hirehub.schemas.pagination import Page, PageParams
from src.hirehub.schemas.project import ProjectRead

router = APIRouter(prefix="/companies", tags=["companies"])

_settings = get_settings()

PatchBody = Annotated[
    dict[str, Any],
    Body(
        description="Fields to change, by name. Unlisted fields keep their value.",
        examples=[{"name": "Acme Robotics", "phone": "010-1234-5678"}],
    ),
]


def _ensure_owner(current_company: CurrentCompany, company_id: int) -> None:
    if current_company.id != company_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Companies can only modify their own records",
        )


@router.post(
    "",
    response_model=CompanyRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Company registered"},
        409: {"description": "Username, email or company name already taken"},
        422: {"description": "Validation error or weak password"},
    },
)
async def register_company(data: CompanyCreate, service: CompanyServiceDep) -> CompanyRead:
    """Register a new company account."""
    company = await service.register(data)
    return CompanyRead.model_validate(company)


@router.get(
    "/me",
    response_model=CompanyRead,
    responses={401: {"description": "Not authenticated"}},
)
async def get_current_company(current_company: CurrentCompany) -> CompanyRead:
    """Get the authenticated company."""
    return CompanyRead.model_validate(current_company)


@router.get(
    "/me/projects",
    response_model=Page[ProjectRead],
    responses={401: {"description": "Not authenticated"}},
)
async def list_my_projects(
    current_company: CurrentCompany,
    service: ProjectServiceDep,
    offset: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int, Query(ge=1, le=_settings.max_page_size)] = _settings.default_page_size,
) -> Page[ProjectRead]:
    """Projects owned by the authenticated company, oldest first."""
    projects, total = await service.list_company_projects(
        current_company, PageParams(offset=offset, size=size)
    )
    return Page(
        items=[ProjectRead.model_validate(p) for p in projects],
        total_count=total,
        offset=offset,
        size=size,
    )


@router.patch(
    "/{company_id}",
    response_model=CompanyRead,
    responses={
        200: {
            "description": "Company updated",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "username": "acme",
                        "email": "hr@acme.example",
                        "name": "Acme Robotics",
                        "phone": "010-1234-5678",
                        "version": 2,
                        "created_at": "2024-01-15T10:30:00",
                        "updated_at": "2024-01-20T14:45:00",
                    }
                }
            },
        },
        403: {"description": "Not the company's own account"},
        404: {"description": "Company not found"},
        409: {"description": "Duplicate value or stale If-Match version"},
        422: {"description": "Unknown field or value of the wrong type"},
    },
)
async def update_company(
    company_id: int,
    patch: PatchBody,
    current_company: CurrentCompany,
    service: CompanyServiceDep,
    expected_version: ExpectedVersion,
    response: Response,
) -> CompanyRead:
    """Partially update a company account.

    Patchable fields: username, email, name, phone.
    """
    _ensure_owner(current_company, company_id)
    company = await service.update_company(company_id, patch, expected_version)
    set_etag(response, company.version)
    return CompanyRead.model_validate(company)


@router.post(
    "/information",
    response_model=CompanyInfoRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Company info created"},
        409: {"description": "Company already has info"},
    },
)
async def create_company_info(
    data: CompanyInfoCreate,
    current_company: CurrentCompany,
    service: CompanyServiceDep,
) -> CompanyInfoRead:
    """Create registration details for the authenticated company."""
    info = await service.create_company_info(current_company.id, data)  # type: ignore[arg-type]
    return CompanyInfoRead.model_validate(info)


@router.get(
    "/information/{company_id}",
    response_model=CompanyInfoRead,
    responses={404: {"description": "Company has no info"}},
)
async def get_company_info(company_id: int, service: CompanyServiceDep) -> CompanyInfoRead:
    info = await service.get_company_info(company_id)
    return CompanyInfoRead.model_validate(info)


@router.patch(
    "/information/{company_id}",
    response_model=CompanyInfoRead,
    responses={
        403: {"description": "Not the company's own info"},
        404: {"description": "Company has no info"},
        409: {"description": "Stale If-Match version"},
        422: {"description": "Unknown field or value of the wrong type"},
    },
)
async def update_company_info(
    company_id: int,
    patch: PatchBody,
    current_company: CurrentCompany,
    service: CompanyServiceDep,
    expected_version: ExpectedVersion,
    response: Response,
) -> CompanyInfoRead:
    """Partially update a company's registration details.

    Patchable fields: ceo, address, company_call, registration_number,
    registration_file.
    """
    _ensure_owner(current_company, company_id)
    info = await service.update_company_info(company_id, patch, expected_version)
    set_etag(response, info.version)
    return CompanyInfoRead.model_validate(info)
