"""Tests for tech-tag queries over the project/tech join table."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.models import Company, Project, Tech
from src.hirehub.repositories import ProjectRepository, ProjectTechRepository, TechRepository
from src.hirehub.schemas.pagination import PageParams
from src.hirehub.schemas.project import ProjectCreate
from src.hirehub.services.patching import PatchApplier
from src.hirehub.services.project_service import ProjectService
from tests.helpers import create_project_with_techs, create_techs

pytestmark = pytest.mark.integration


@pytest.fixture
async def techs(db_session: AsyncSession) -> dict[str, Tech]:
    return await create_techs(db_session, "Java", "Go", "Rust", "Kotlin")


@pytest.fixture
async def projects(
    db_session: AsyncSession, test_company: Company, techs: dict[str, Tech]
) -> dict[str, Project]:
    """Join table {(P1,Java),(P1,Go),(P2,Go),(P3,Rust)}; Kotlin unused."""
    return {
        "P1": await create_project_with_techs(
            db_session, test_company, [techs["Java"], techs["Go"]], name="P1"
        ),
        "P2": await create_project_with_techs(
            db_session, test_company, [techs["Go"]], name="P2"
        ),
        "P3": await create_project_with_techs(
            db_session, test_company, [techs["Rust"]], name="P3"
        ),
    }


@pytest.fixture
def service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(
        ProjectRepository(db_session),
        TechRepository(db_session),
        ProjectTechRepository(db_session),
        db_session,
        PatchApplier(db_session),
    )


def _names(items: list[Project]) -> list[str]:
    return [project.name for project in items]


class TestProjectsForTechs:
    async def test_union_without_duplicates(self, service, techs, projects):
        result = await service.projects_for_techs([techs["Java"], techs["Go"]])
        assert _names(result) == ["P1", "P2"]

    async def test_single_tech(self, service, techs, projects):
        assert _names(await service.projects_for_techs([techs["Rust"]])) == ["P3"]

    async def test_empty_tech_set(self, service, projects):
        assert await service.projects_for_techs([]) == []

    async def test_tech_without_projects(self, service, techs, projects):
        assert await service.projects_for_techs([techs["Kotlin"]]) == []

    async def test_membership_iff_join_row_exists(self, service, techs, projects):
        all_techs = list(techs.values())
        result = await service.projects_for_techs(all_techs)

        assert _names(result) == ["P1", "P2", "P3"]
        assert len({project.id for project in result}) == len(result)


class TestProjectsForTechsPaged:
    async def test_first_page(self, service, techs, projects):
        items, total = await service.projects_for_techs_paged(
            [techs["Java"], techs["Go"], techs["Rust"]], PageParams(offset=0, size=2)
        )
        assert _names(items) == ["P1", "P2"]
        assert total == 3

    async def test_second_page(self, service, techs, projects):
        items, total = await service.projects_for_techs_paged(
            [techs["Java"], techs["Go"], techs["Rust"]], PageParams(offset=2, size=2)
        )
        assert _names(items) == ["P3"]
        assert total == 3

    async def test_count_is_distinct_projects(self, service, techs, projects):
        """P1 has two matching join rows but counts once."""
        items, total = await service.projects_for_techs_paged(
            [techs["Java"], techs["Go"]], PageParams(offset=0, size=10)
        )
        assert _names(items) == ["P1", "P2"]
        assert total == 2

    async def test_offset_past_end(self, service, techs, projects):
        items, total = await service.projects_for_techs_paged(
            [techs["Go"]], PageParams(offset=10, size=5)
        )
        assert items == []
        assert total == 2

    async def test_empty_tech_set(self, service, projects):
        assert await service.projects_for_techs_paged([], PageParams()) == ([], 0)

    @pytest.mark.parametrize("size", [1, 2, 3, 4])
    async def test_page_never_exceeds_size(self, service, techs, projects, size):
        items, total = await service.projects_for_techs_paged(
            list(techs.values()), PageParams(offset=0, size=size)
        )
        assert len(items) <= size
        assert total >= len(items)

    async def test_search_by_unknown_name_matches_nothing(self, service, projects):
        assert await service.search_by_tech_names(["COBOL"], PageParams()) == ([], 0)


class TestTechsForProject:
    async def test_techs_ordered_by_id(self, service, techs, projects):
        result = await service.techs_for_project(projects["P1"].id)
        assert [tech.name for tech in result] == ["Java", "Go"]

    async def test_project_without_techs(self, db_session, service, test_company):
        project = await create_project_with_techs(db_session, test_company, [])
        assert await service.techs_for_project(project.id) == []


class TestRelationRows:
    async def test_rows_for_project(self, db_session, techs, projects):
        repo = ProjectTechRepository(db_session)

        rows = await repo.list_relations_for_project(projects["P1"].id)

        assert [(row.project.name, row.tech.name) for row in rows] == [
            ("P1", "Java"),
            ("P1", "Go"),
        ]
        assert all(row.relation.project_id == row.project.id for row in rows)

    async def test_rows_for_techs(self, db_session, techs, projects):
        repo = ProjectTechRepository(db_session)

        rows = await repo.list_relations_for_techs([techs["Go"].id])

        assert [(row.project.name, row.tech.name) for row in rows] == [
            ("P1", "Go"),
            ("P2", "Go"),
        ]

    async def test_rows_for_no_techs(self, db_session, projects):
        assert await ProjectTechRepository(db_session).list_relations_for_techs([]) == []


class TestCreateProject:
    async def test_creates_missing_techs_and_links(self, db_session, service, test_company, techs):
        project, linked = await service.create_project(
            test_company, ProjectCreate(name="Billing", techs=["Go", "Elixir"])
        )

        assert [tech.name for tech in linked] == ["Go", "Elixir"]
        stored = await service.techs_for_project(project.id)
        assert {tech.name for tech in stored} == {"Go", "Elixir"}
        assert (await TechRepository(db_session).get_by_name("Elixir")) is not None
