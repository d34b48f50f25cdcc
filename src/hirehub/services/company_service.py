"""Company account and company-info business logic."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.core.exceptions import DuplicateConstraintError, NotFoundError
from src.hirehub.core.logging import get_logger
from src.hirehub.core.security import hash_password
from src.hirehub.models import Company, CompanyInfo
from src.hirehub.repositories import CompanyInfoRepository, CompanyRepository
from src.hirehub.schemas.company import CompanyCreate, CompanyInfoCreate
from src.hirehub.services.patching import PatchApplier

logger = get_logger(__name__)


class CompanyService:
    """Company registration, lookup and partial updates."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        info_repo: CompanyInfoRepository,
        session: AsyncSession,
        patcher: PatchApplier,
    ):
        self.company_repo = company_repo
        self.info_repo = info_repo
        self.session = session
        self.patcher = patcher

    async def register(self, data: CompanyCreate) -> Company:
        """Register a new company account.

        Username, email and company name must each be unused. The checks run
        before insert so the caller gets a specific message; the unique
        constraints still catch races.

        Raises:
            DuplicateConstraintError: if username, email or name is taken
        """
        email = data.email.lower().strip()
        await self._ensure_unique(data.username, email, data.name)

        company = Company(
            username=data.username,
            hashed_password=hash_password(data.password),
            email=email,
            name=data.name,
            phone=data.phone,
        )
        self.company_repo.add(company)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateConstraintError("Company is already registered") from e
        await self.session.refresh(company)

        logger.info("Company registered", company_id=company.id)
        return company

    async def _ensure_unique(self, username: str, email: str, name: str) -> None:
        if await self.company_repo.get_by_username(username) is not None:
            raise DuplicateConstraintError("Please enter a different username")
        if await self.company_repo.get_by_email(email) is not None:
            raise DuplicateConstraintError("Email already registered")
        if await self.company_repo.get_by_name(name) is not None:
            raise DuplicateConstraintError("Company name already exists")

    async def get_by_id(self, company_id: int) -> Company:
        """Get company by id.

        Raises:
            NotFoundError: if no such company
        """
        company = await self.company_repo.get_by_id(company_id)
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    async def get_by_username(self, username: str) -> Company:
        company = await self.company_repo.get_by_username(username)
        if company is None:
            raise NotFoundError("Company", username)
        return company

    async def update_company(
        self,
        company_id: int,
        patch: Mapping[Any, Any],
        expected_version: int | None = None,
    ) -> Company:
        """Apply a partial update to a company account."""
        company = await self.get_by_id(company_id)
        return await self.patcher.apply(company, patch, expected_version)

    async def get_company_info(self, company_id: int) -> CompanyInfo:
        """Get the registration details of a company.

        Raises:
            NotFoundError: if the company has no info yet
        """
        info = await self.info_repo.get_by_company_id(company_id)
        if info is None:
            raise NotFoundError("CompanyInfo for company", company_id)
        return info

    async def create_company_info(self, company_id: int, data: CompanyInfoCreate) -> CompanyInfo:
        """Create the registration details of a company.

        Raises:
            NotFoundError: if the company does not exist
            DuplicateConstraintError: if the company already has info
        """
        await self.get_by_id(company_id)
        if await self.info_repo.get_by_company_id(company_id) is not None:
            raise DuplicateConstraintError(f"Company {company_id} already has company info")

        info = CompanyInfo(company_id=company_id, **data.model_dump())
        self.info_repo.add(info)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateConstraintError(
                f"Company {company_id} already has company info"
            ) from e
        await self.session.refresh(info)

        logger.info("Company info created", company_id=company_id)
        return info

    async def update_company_info(
        self,
        company_id: int,
        patch: Mapping[Any, Any],
        expected_version: int | None = None,
    ) -> CompanyInfo:
        """Apply a partial update to a company's info, located by company id."""
        info = await self.get_company_info(company_id)
        return await self.patcher.apply(info, patch, expected_version)
