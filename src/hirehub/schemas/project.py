"""Project and tech schemas for API request/response."""

from datetime import datetime

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator


def clean_tech_names(names: Iterable[str]) -> list[str]:
    """Strip names, drop blanks and duplicates, keep first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)


class ProjectCreate(BaseModel):
    """Schema for creating a project together with the techs it uses."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    techs: list[str] = Field(default_factory=list, max_length=50)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v

    @field_validator("techs")
    @classmethod
    def normalize_techs(cls, v: list[str]) -> list[str]:
        names = clean_tech_names(v)
        for name in names:
            if len(name) > 50:
                raise ValueError(f"Tech name too long: {name[:20]}...")
        return names


class TechRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    company_id: int
    name: str
    description: str | None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectDetail(ProjectRead):
    techs: list[TechRead] = []
