"""Authenticated-principal dependencies."""

from typing import Annotated, Any

from fastapi import Depends, Header, HTTPException, status

from src.hirehub.api.dependencies.repositories import CompanyRepo, UserRepo
from src.hirehub.core.logging import bind_principal_context
from src.hirehub.core.security import decode_token
from src.hirehub.models import Company, User
from src.hirehub.schemas.auth import AccountType


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _validate_access_token(
    authorization: str | None, account_type: AccountType
) -> tuple[dict[str, Any], int]:
    """Validate header format, token, token type and account type.

    Returns:
        Tuple of (payload, principal id)
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized("Missing or invalid authorization header")

    payload = decode_token(authorization[7:])
    if payload is None:
        raise _unauthorized("Invalid or expired token")

    if payload.get("type") != "access":
        raise _unauthorized("Invalid token type")

    if payload.get("account_type") != account_type.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"This endpoint requires a {account_type.value} account",
        )

    try:
        principal_id = int(payload.get("sub", ""))
    except ValueError as e:
        raise _unauthorized("Invalid token payload") from e

    return payload, principal_id


async def get_current_company(
    company_repo: CompanyRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> Company:
    """Validate access token and return the company it was issued to."""
    _, company_id = _validate_access_token(authorization, AccountType.COMPANY)

    company = await company_repo.get_by_id(company_id)
    if company is None:
        raise _unauthorized("Company not found")

    bind_principal_context(company_id, AccountType.COMPANY.value)
    return company


CurrentCompany = Annotated[Company, Depends(get_current_company)]


async def get_current_user(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate access token and return the user it was issued to."""
    _, user_id = _validate_access_token(authorization, AccountType.USER)

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise _unauthorized("User not found")

    bind_principal_context(user_id, AccountType.USER.value)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
