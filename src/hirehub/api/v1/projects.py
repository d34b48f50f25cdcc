"""Project endpoints and tech-tag search."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Response, status

from src.hirehub.api.dependencies import (
    CurrentCompany,
    ExpectedVersion,
    ProjectServiceDep,
    set_etag,
)
from src.hirehub.core.config import get_settings
from src.hirehub.schemas.pagination import Page, PageParams
from src.hirehub.schemas.project import (
    ProjectCreate,
    ProjectDetail,
    ProjectRead,
    TechRead,
)

router = APIRouter(prefix="/projects", tags=["projects"])

_settings = get_settings()


@router.post(
    "",
    response_model=ProjectDetail,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Project created with its techs",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "company_id": 1,
                        "name": "Payments backend",
                        "description": "Rewrite of the billing service",
                        "version": 1,
                        "created_at": "2024-01-15T10:30:00",
                        "updated_at": "2024-01-15T10:30:00",
                        "techs": [{"id": 1, "name": "Go"}, {"id": 2, "name": "Java"}],
                    }
                }
            },
        },
        401: {"description": "Not authenticated"},
    },
)
async def create_project(
    data: ProjectCreate,
    current_company: CurrentCompany,
    service: ProjectServiceDep,
) -> ProjectDetail:
    """Create a project for the authenticated company.

    Techs are referenced by name; unknown names are created.
    """
    project, techs = await service.create_project(current_company, data)
    return ProjectDetail(
        **ProjectRead.model_validate(project).model_dump(),
        techs=[TechRead.model_validate(t) for t in techs],
    )


@router.get(
    "",
    response_model=Page[ProjectRead],
    responses={
        200: {
            "description": "Projects using any of the given techs, ordered by id",
            "content": {
                "application/json": {
                    "example": {
                        "items": [
                            {
                                "id": 1,
                                "company_id": 1,
                                "name": "Payments backend",
                                "description": None,
                                "version": 1,
                                "created_at": "2024-01-15T10:30:00",
                                "updated_at": "2024-01-15T10:30:00",
                            }
                        ],
                        "total_count": 1,
                        "offset": 0,
                        "size": 20,
                    }
                }
            },
        }
    },
)
async def search_projects(
    service: ProjectServiceDep,
    tech: Annotated[
        list[str], Query(description="Tech names; a project matches if it uses any of them")
    ] = [],  # noqa: B006
    offset: Annotated[int, Query(ge=0, description="Number of matches to skip")] = 0,
    size: Annotated[
        int,
        Query(ge=1, le=_settings.max_page_size, description="Number of items per page"),
    ] = _settings.default_page_size,
) -> Page[ProjectRead]:
    """Tag search: projects linked to at least one of the named techs.

    Each project appears once however many of the techs it uses.
    No `tech` parameter means no matches.
    """
    page = PageParams(offset=offset, size=size)
    projects, total = await service.search_by_tech_names(tech, page)
    return Page(
        items=[ProjectRead.model_validate(p) for p in projects],
        total_count=total,
        offset=offset,
        size=size,
    )


@router.get("/techs", response_model=list[TechRead])
async def list_techs(service: ProjectServiceDep) -> list[TechRead]:
    """All known techs, alphabetically."""
    techs = await service.list_techs()
    return [TechRead.model_validate(t) for t in techs]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    responses={404: {"description": "Project not found"}},
)
async def get_project(project_id: int, service: ProjectServiceDep) -> ProjectRead:
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}/techs",
    response_model=list[TechRead],
    responses={404: {"description": "Project not found"}},
)
async def list_project_techs(project_id: int, service: ProjectServiceDep) -> list[TechRead]:
    """Techs used by a project, ordered by id."""
    techs = await service.techs_for_project(project_id)
    return [TechRead.model_validate(t) for t in techs]


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    responses={
        403: {"description": "Project belongs to another company"},
        404: {"description": "Project not found"},
        409: {"description": "Stale If-Match version"},
        422: {"description": "Unknown field or value of the wrong type"},
    },
)
async def update_project(
    project_id: int,
    patch: Annotated[dict[str, Any], Body(examples=[{"description": "Now in Go"}])],
    current_company: CurrentCompany,
    service: ProjectServiceDep,
    expected_version: ExpectedVersion,
    response: Response,
) -> ProjectRead:
    """Partially update a project. Patchable fields: name, description."""
    project = await service.update_project(
        project_id, patch, current_company, expected_version
    )
    set_etag(response, project.version)
    return ProjectRead.model_validate(project)
