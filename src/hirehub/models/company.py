"""Company (tenant) account and its registration details."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.hirehub.models.base import utc_now


class Company(SQLModel, table=True):
    """Company account. Each company is a tenant owning its projects."""

    __tablename__ = "companies"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(max_length=255, unique=True, index=True)
    name: str = Field(max_length=100, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=30)
    hashed_password: str = Field(max_length=255)
    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class CompanyInfo(SQLModel, table=True):
    """Business registration details, at most one row per company."""

    __tablename__ = "company_infos"

    id: int | None = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", unique=True, index=True)
    ceo: str | None = Field(default=None, max_length=100)
    address: str | None = Field(default=None, max_length=255)
    company_call: str | None = Field(default=None, max_length=30)
    registration_number: str | None = Field(default=None, max_length=50)
    registration_file: str | None = Field(default=None, max_length=500)
    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
