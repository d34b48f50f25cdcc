"""Company schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.hirehub.schemas.auth import validate_password_strength


class CompanyCreate(BaseModel):
    """Company registration request."""

    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(min_length=8, max_length=100)
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=30)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return validate_password_strength(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Company name cannot be empty or whitespace only")
        return v


class CompanyRead(BaseModel):
    id: int
    username: str
    email: str
    name: str
    phone: str | None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CompanyInfoCreate(BaseModel):
    """Registration details for the current company."""

    ceo: str | None = Field(default=None, max_length=100)
    address: str | None = Field(default=None, max_length=255)
    company_call: str | None = Field(default=None, max_length=30)
    registration_number: str | None = Field(default=None, max_length=50)
    registration_file: str | None = Field(default=None, max_length=500)


class CompanyInfoRead(BaseModel):
    id: int
    company_id: int
    ceo: str | None
    address: str | None
    company_call: str | None
    registration_number: str | None
    registration_file: str | None
    version: int
    updated_at: datetime

    model_config = {"from_attributes": True}
