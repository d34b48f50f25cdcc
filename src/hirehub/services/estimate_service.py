"""Estimate (rating) service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.core.exceptions import NotFoundError
from src.hirehub.core.logging import get_logger
from src.hirehub.models import Company, Estimate, User
from src.hirehub.repositories import EstimateRepository, UserRepository
from src.hirehub.schemas.estimate import EstimateCreate

logger = get_logger(__name__)


class EstimateService:
    def __init__(
        self,
        estimate_repo: EstimateRepository,
        user_repo: UserRepository,
        session: AsyncSession,
    ):
        self.estimate_repo = estimate_repo
        self.user_repo = user_repo
        self.session = session

    async def _get_user(self, username: str) -> User:
        user = await self.user_repo.get_by_username(username)
        if user is None:
            raise NotFoundError("User", username)
        return user

    async def create_estimate(
        self, company: Company, username: str, data: EstimateCreate
    ) -> Estimate:
        """Record `company`'s rating of the user named `username`."""
        user = await self._get_user(username)
        estimate = Estimate(
            user_id=user.id,  # type: ignore[arg-type]
            company_id=company.id,  # type: ignore[arg-type]
            score=data.score,
            comment=data.comment,
        )
        estimate = await self.estimate_repo.save(estimate)
        logger.info(
            "Estimate registered",
            estimate_id=estimate.id,
            user_id=user.id,
            company_id=company.id,
            score=estimate.score,
        )
        return estimate

    async def list_for_user(self, username: str) -> tuple[User, list[Estimate], float | None]:
        """All estimates a user received.

        Returns:
            Tuple of (user, estimates newest first, average score or None)
        """
        user = await self._get_user(username)
        estimates = await self.estimate_repo.list_for_user(user.id)  # type: ignore[arg-type]
        average = await self.estimate_repo.average_score_for_user(user.id)  # type: ignore[arg-type]
        return user, estimates, average
