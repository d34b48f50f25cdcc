"""Repository for the Project <-> Tech join table.

Every association lookup goes through an explicit query here; models carry
no lazy relationship attributes.

Matching semantics for tech filters are set-union: a project matches when
at least one of its join rows points at one of the requested techs. The
matching project ids are expressed once, as a subquery, and reused by the
item query and the count query, so both passes see the same de-duplicated
set for a given database state.
"""

from collections.abc import Iterable
from typing import Any, NamedTuple

from sqlalchemy import func
from sqlmodel import col, select

from src.hirehub.models import Project, ProjectTech, Tech
from src.hirehub.repositories.base import BaseRepository


class ProjectTechRow(NamedTuple):
    """A join row together with the project and tech it links."""

    relation: ProjectTech
    project: Project
    tech: Tech


def _matching_project_ids(tech_ids: set[int]) -> Any:
    return select(ProjectTech.project_id).where(col(ProjectTech.tech_id).in_(tech_ids))


class ProjectTechRepository(BaseRepository[ProjectTech]):
    model = ProjectTech

    async def list_relations_for_project(self, project_id: int) -> list[ProjectTechRow]:
        """Join rows of one project, with their project and tech loaded."""
        query = self._rows_query().where(ProjectTech.project_id == project_id)
        result = await self.session.execute(query)
        return [ProjectTechRow(*row) for row in result.all()]

    async def list_relations_for_techs(self, tech_ids: Iterable[int]) -> list[ProjectTechRow]:
        """Join rows pointing at any of `tech_ids`, with project and tech loaded."""
        ids = set(tech_ids)
        if not ids:
            return []
        query = self._rows_query().where(col(ProjectTech.tech_id).in_(ids))
        result = await self.session.execute(query)
        return [ProjectTechRow(*row) for row in result.all()]

    async def list_techs_for_project(self, project_id: int) -> list[Tech]:
        """Techs used by a project, ordered by tech id."""
        query = (
            select(Tech)
            .join(ProjectTech, col(ProjectTech.tech_id) == col(Tech.id))
            .where(ProjectTech.project_id == project_id)
            .distinct()
            .order_by(col(Tech.id))
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_projects_for_techs(self, tech_ids: Iterable[int]) -> list[Project]:
        """Every project using at least one of `tech_ids`, each once, by id."""
        ids = set(tech_ids)
        if not ids:
            return []
        query = (
            select(Project)
            .where(col(Project.id).in_(_matching_project_ids(ids)))
            .order_by(col(Project.id))
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def page_projects_for_techs(
        self, tech_ids: Iterable[int], offset: int, size: int
    ) -> tuple[list[Project], int]:
        """Offset/limit slice of `list_projects_for_techs` plus the full match count.

        The count is a separate statement on the same session. Without a
        snapshot isolation level, rows written between the two statements
        can make the count drift from the page (accepted read skew).

        Returns:
            Tuple of (items, total_count)
        """
        ids = set(tech_ids)
        if not ids:
            return [], 0

        matching = _matching_project_ids(ids)
        items_query = (
            select(Project)
            .where(col(Project.id).in_(matching))
            .order_by(col(Project.id))
            .offset(offset)
            .limit(size)
        )
        items = list((await self.session.execute(items_query)).scalars().all())

        count_query = (
            select(func.count()).select_from(Project).where(col(Project.id).in_(matching))
        )
        total = (await self.session.execute(count_query)).scalar_one()
        return items, total

    def add_links(self, project_id: int, tech_ids: Iterable[int]) -> list[ProjectTech]:
        """Stage one join row per distinct tech id (no flush/commit)."""
        links = [
            ProjectTech(project_id=project_id, tech_id=tech_id)
            for tech_id in sorted(set(tech_ids))
        ]
        self.session.add_all(links)
        return links

    @staticmethod
    def _rows_query() -> Any:
        return (
            select(ProjectTech, Project, Tech)
            .join(Project, col(ProjectTech.project_id) == col(Project.id))
            .join(Tech, col(ProjectTech.tech_id) == col(Tech.id))
            .order_by(col(ProjectTech.id))
        )
