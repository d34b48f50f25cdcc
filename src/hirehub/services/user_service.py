from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.hirehub.core.exceptions import DuplicateConstraintError, NotFoundError
from src.hirehub.core.logging import get_logger
from src.hirehub.core.security import hash_password
from src.hirehub.models import User
from src.hirehub.repositories import UserRepository
from src.hirehub.schemas.user import UserCreate
from src.hirehub.services.patching import PatchApplier

logger = get_logger(__name__)


class UserService:
    """User account management service."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession, patcher: PatchApplier):
        self.user_repo = user_repo
        self.session = session
        self.patcher = patcher

    async def register(self, data: UserCreate) -> User:
        """Register a new user. Username and email must be unused."""
        email = data.email.lower().strip()
        if await self.user_repo.get_by_username(data.username) is not None:
            raise DuplicateConstraintError("Please enter a different username")
        if await self.user_repo.get_by_email(email) is not None:
            raise DuplicateConstraintError("Email already registered")

        user = User(
            username=data.username,
            hashed_password=hash_password(data.password),
            email=email,
            name=data.name,
            phone=data.phone,
        )
        self.user_repo.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateConstraintError("User is already registered") from e
        await self.session.refresh(user)

        logger.info("User registered", user_id=user.id)
        return user

    async def get_by_username(self, username: str) -> User:
        user = await self.user_repo.get_by_username(username)
        if user is None:
            raise NotFoundError("User", username)
        return user

    async def update_user(
        self,
        user_id: int,
        patch: Mapping[Any, Any],
        expected_version: int | None = None,
    ) -> User:
        """Apply a partial update to a user account."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return await self.patcher.apply(user, patch, expected_version)
