from datetime import datetime

from pydantic import BaseModel, Field

from src.hirehub.models.estimate import MAX_SCORE, MIN_SCORE


class EstimateCreate(BaseModel):
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    comment: str | None = Field(default=None, max_length=1000)


class EstimateRead(BaseModel):
    id: int
    user_id: int
    company_id: int
    score: int
    comment: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class EstimateSummary(BaseModel):
    """All estimates a user received, with their mean score."""

    username: str
    average_score: float | None
    count: int
    items: list[EstimateRead]
