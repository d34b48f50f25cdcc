"""Repositories for Company and CompanyInfo entities."""

from sqlmodel import select

from src.hirehub.models import Company, CompanyInfo
from src.hirehub.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company

    async def get_by_username(self, username: str) -> Company | None:
        """Get company by login username."""
        result = await self.session.execute(select(Company).where(Company.username == username))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Company | None:
        result = await self.session.execute(select(Company).where(Company.email == email))
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Company | None:
        result = await self.session.execute(select(Company).where(Company.name == name))
        return result.scalar_one_or_none()


class CompanyInfoRepository(BaseRepository[CompanyInfo]):
    model = CompanyInfo

    async def get_by_company_id(self, company_id: int) -> CompanyInfo | None:
        """Get the registration details owned by a company."""
        result = await self.session.execute(
            select(CompanyInfo).where(CompanyInfo.company_id == company_id)
        )
        return result.scalar_one_or_none()
