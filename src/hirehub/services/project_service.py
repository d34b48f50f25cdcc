"""Project listings and tech-tag queries."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.core.exceptions import (
    DuplicateConstraintError,
    NotFoundError,
    PermissionDeniedError,
)
from src.hirehub.core.logging import get_logger
from src.hirehub.models import Company, Project, Tech
from src.hirehub.repositories import ProjectRepository, ProjectTechRepository, TechRepository
from src.hirehub.schemas.pagination import PageParams
from src.hirehub.schemas.project import ProjectCreate, clean_tech_names
from src.hirehub.services.patching import PatchApplier

logger = get_logger(__name__)


class ProjectService:
    def __init__(
        self,
        project_repo: ProjectRepository,
        tech_repo: TechRepository,
        project_tech_repo: ProjectTechRepository,
        session: AsyncSession,
        patcher: PatchApplier,
    ):
        self.project_repo = project_repo
        self.tech_repo = tech_repo
        self.project_tech_repo = project_tech_repo
        self.session = session
        self.patcher = patcher

    async def create_project(
        self, company: Company, data: ProjectCreate
    ) -> tuple[Project, list[Tech]]:
        """Create a project and link it to the named techs.

        Missing techs are created. Tech names are already de-duplicated by
        the schema, so each (project, tech) pair is written once.

        Returns:
            Tuple of (project, techs ordered by id)
        """
        techs = await self._get_or_create_techs(data.techs)

        project = Project(
            company_id=company.id,  # type: ignore[arg-type]
            name=data.name,
            description=data.description,
        )
        self.project_repo.add(project)
        try:
            await self.session.flush()
            self.project_tech_repo.add_links(
                project.id,  # type: ignore[arg-type]
                [tech.id for tech in techs],  # type: ignore[misc]
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateConstraintError(
                "Project could not be saved because of a conflicting record, retry"
            ) from e
        await self.session.refresh(project)

        logger.info(
            "Project created",
            project_id=project.id,
            company_id=company.id,
            techs=[tech.name for tech in techs],
        )
        return project, sorted(techs, key=lambda tech: tech.id or 0)

    async def _get_or_create_techs(self, names: list[str]) -> list[Tech]:
        existing = await self.tech_repo.list_by_names(names)
        known = {tech.name for tech in existing}
        created = [Tech(name=name) for name in names if name not in known]
        for tech in created:
            self.tech_repo.add(tech)
        if created:
            await self.session.flush()
        return existing + created

    async def get_project(self, project_id: int) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def techs_for_project(self, project_id: int) -> list[Tech]:
        """Techs joined to a project, ordered by tech id."""
        await self.get_project(project_id)
        return await self.project_tech_repo.list_techs_for_project(project_id)

    async def projects_for_techs(self, techs: Iterable[Tech]) -> list[Project]:
        """Projects using at least one of `techs`, each once. Empty input, empty result."""
        return await self.project_tech_repo.list_projects_for_techs(_tech_ids(techs))

    async def projects_for_techs_paged(
        self, techs: Iterable[Tech], page: PageParams
    ) -> tuple[list[Project], int]:
        """Paged `projects_for_techs`.

        Returns:
            Tuple of (items, total_count)
        """
        return await self.project_tech_repo.page_projects_for_techs(
            _tech_ids(techs), page.offset, page.size
        )

    async def search_by_tech_names(
        self, names: Iterable[str], page: PageParams
    ) -> tuple[list[Project], int]:
        """Paged tag search by tech name. Unknown names match nothing.

        Names are cleaned the same way as on project creation.
        """
        techs = await self.tech_repo.list_by_names(clean_tech_names(names))
        return await self.projects_for_techs_paged(techs, page)

    async def list_techs(self) -> list[Tech]:
        return await self.tech_repo.list_all()

    async def list_company_projects(
        self, company: Company, page: PageParams
    ) -> tuple[list[Project], int]:
        """A company's own projects, oldest first.

        Returns:
            Tuple of (items, total_count)
        """
        return await self.project_repo.list_by_company(
            company.id,  # type: ignore[arg-type]
            page.offset,
            page.size,
        )

    async def update_project(
        self,
        project_id: int,
        patch: Mapping[Any, Any],
        owner: Company,
        expected_version: int | None = None,
    ) -> Project:
        """Apply a partial update to a project owned by `owner`.

        Raises:
            NotFoundError: if the project does not exist
            PermissionDeniedError: if another company owns the project
        """
        project = await self.get_project(project_id)
        if project.company_id != owner.id:
            raise PermissionDeniedError("Project belongs to another company")
        return await self.patcher.apply(project, patch, expected_version)


def _tech_ids(techs: Iterable[Tech]) -> set[int]:
    return {tech.id for tech in techs if tech.id is not None}
