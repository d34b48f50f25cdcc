"""Project listings, technology tags, and the join table between them.

There are no ORM relationship attributes here: the Project <-> Tech
association is only reachable through ProjectTechRepository, which issues
explicit joins.
"""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.hirehub.models.base import utc_now


class Project(SQLModel, table=True):
    """Project listing owned by a company."""

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", index=True)
    name: str = Field(max_length=200, index=True)
    description: str | None = Field(default=None, max_length=1000)
    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Tech(SQLModel, table=True):
    """Technology/skill tag. Never modified after creation."""

    __tablename__ = "techs"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, unique=True, index=True)


class ProjectTech(SQLModel, table=True):
    """Join row: this project uses this tech."""

    __tablename__ = "project_techs"
    __table_args__ = (
        UniqueConstraint("project_id", "tech_id", name="uq_project_techs_project_tech"),
    )

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    tech_id: int = Field(foreign_key="techs.id", index=True)
