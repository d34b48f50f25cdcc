"""Authentication service - password login for companies and users."""

from src.hirehub.core.exceptions import AuthenticationError
from src.hirehub.core.logging import get_logger
from src.hirehub.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    verify_password,
)
from src.hirehub.repositories import CompanyRepository, UserRepository
from src.hirehub.schemas.auth import AccountType, LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Issues access tokens for company and user principals."""

    def __init__(self, company_repo: CompanyRepository, user_repo: UserRepository):
        self.company_repo = company_repo
        self.user_repo = user_repo

    async def authenticate(
        self, username: str, password: str, account_type: AccountType
    ) -> LoginResponse:
        """Check credentials and return an access token.

        The password is always verified, against a dummy hash when the
        account does not exist, so response timing does not reveal which
        usernames are registered.

        Raises:
            AuthenticationError: if the username or password is wrong
        """
        if account_type is AccountType.COMPANY:
            account = await self.company_repo.get_by_username(username)
        else:
            account = await self.user_repo.get_by_username(username)

        password_hash = account.hashed_password if account else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if account is None or not password_valid:
            logger.info("Login failed", account_type=account_type.value)
            raise AuthenticationError("Invalid username or password")

        token = create_access_token(account.id, account_type.value)  # type: ignore[arg-type]
        return LoginResponse(access_token=token, account_type=account_type)
