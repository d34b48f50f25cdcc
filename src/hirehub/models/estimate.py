"""Estimate model - a company's rating of a user."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.hirehub.models.base import utc_now

MIN_SCORE = 1
MAX_SCORE = 5


class Estimate(SQLModel, table=True):
    __tablename__ = "estimates"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    company_id: int = Field(foreign_key="companies.id", index=True)
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    comment: str | None = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
