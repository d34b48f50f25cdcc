"""Test helper functions for common data creation patterns."""

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.core.security import create_access_token
from src.hirehub.models import Company, Project, ProjectTech, Tech, User
from src.hirehub.schemas.auth import AccountType
from tests.factories import ProjectFactory, TechFactory


def auth_headers(principal: Company | User) -> dict[str, str]:
    """Bearer header carrying an access token for a company or user."""
    account_type = AccountType.COMPANY if isinstance(principal, Company) else AccountType.USER
    token = create_access_token(principal.id, account_type.value)  # type: ignore[arg-type]
    return {"Authorization": f"Bearer {token}"}


async def create_techs(session: AsyncSession, *names: str) -> dict[str, Tech]:
    """Create techs by name and return them keyed by name."""
    techs = {name: TechFactory.build(name=name) for name in names}
    session.add_all(techs.values())
    await session.commit()
    return techs


async def create_project_with_techs(
    session: AsyncSession,
    company: Company,
    techs: Iterable[Tech],
    **project_kwargs,
) -> Project:
    """Create a project owned by `company` with one join row per tech.

    Args:
        session: Database session
        company: Owning company
        techs: Techs the project uses
        **project_kwargs: Additional args passed to ProjectFactory

    Returns:
        The committed project
    """
    project = ProjectFactory.build(company_id=company.id, **project_kwargs)
    session.add(project)
    await session.flush()

    session.add_all(ProjectTech(project_id=project.id, tech_id=tech.id) for tech in techs)
    await session.commit()
    await session.refresh(project)
    return project
