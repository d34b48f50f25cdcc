"""Repository for Estimate entity."""

from sqlalchemy import func
from sqlmodel import col, select

from src.hirehub.models import Estimate
from src.hirehub.repositories.base import BaseRepository


class EstimateRepository(BaseRepository[Estimate]):
    model = Estimate

    async def list_for_user(self, user_id: int) -> list[Estimate]:
        """Estimates received by a user, newest first."""
        result = await self.session.execute(
            select(Estimate)
            .where(Estimate.user_id == user_id)
            .order_by(col(Estimate.created_at).desc(), col(Estimate.id).desc())
        )
        return list(result.scalars().all())

    async def average_score_for_user(self, user_id: int) -> float | None:
        """Mean score for a user, or None when nobody has rated them."""
        result = await self.session.execute(
            select(func.avg(Estimate.score)).where(Estimate.user_id == user_id)
        )
        average = result.scalar_one_or_none()
        return float(average) if average is not None else None
