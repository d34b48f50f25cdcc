"""Repositories for Project and Tech entities."""

from collections.abc import Iterable

from sqlmodel import col, select

from src.hirehub.models import Project, Tech
from src.hirehub.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_by_company(
        self, company_id: int, offset: int = 0, size: int = 20
    ) -> tuple[list[Project], int]:
        """List a company's projects, oldest first.

        Returns:
            Tuple of (items, total_count)
        """
        query = select(Project).where(Project.company_id == company_id)
        return await self.paginate(query, offset, size, col(Project.id))


class TechRepository(BaseRepository[Tech]):
    model = Tech

    async def get_by_name(self, name: str) -> Tech | None:
        result = await self.session.execute(select(Tech).where(Tech.name == name))
        return result.scalar_one_or_none()

    async def list_by_names(self, names: Iterable[str]) -> list[Tech]:
        """Get techs whose name is in `names`. Unknown names are skipped."""
        wanted = set(names)
        if not wanted:
            return []
        result = await self.session.execute(
            select(Tech).where(col(Tech.name).in_(wanted)).order_by(col(Tech.id))
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[Tech]:
        result = await self.session.execute(select(Tech).order_by(col(Tech.name)))
        return list(result.scalars().all())
