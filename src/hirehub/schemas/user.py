from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.hirehub.schemas.auth import validate_password_strength


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(min_length=8, max_length=100)
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=30)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return validate_password_strength(v)


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    name: str
    phone: str | None
    version: int
    created_at: datetime

    model_config = {"from_attributes": True}


class UserPublic(BaseModel):
    """Profile visible to companies."""

    id: int
    username: str
    name: str

    model_config = {"from_attributes": True}
