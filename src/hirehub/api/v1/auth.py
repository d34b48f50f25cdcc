"""Authentication endpoints."""

from fastapi import APIRouter

from src.hirehub.api.dependencies import AuthServiceDep
from src.hirehub.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "account_type": "company",
                    }
                }
            },
        },
        401: {"description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """Authenticate a company or user and return an access token.

    `account_type` selects which account table the username is looked up in;
    the token only grants access to endpoints for that account type.
    """
    return await service.authenticate(
        login_data.username, login_data.password, login_data.account_type
    )
