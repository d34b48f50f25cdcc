"""Domain errors and the exception handlers that render them with request_id."""

from collections.abc import Iterable

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.hirehub.core.logging import get_logger

logger = get_logger(__name__)


class HireHubError(Exception):
    """Base class for errors surfaced by services."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(HireHubError):
    """Entity or id absent from the database."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} {key} not found")
        self.entity = entity
        self.key = key


class UnknownFieldError(HireHubError):
    """Patch references fields the entity type does not allow."""

    status_code = 422

    def __init__(self, entity: str, fields: Iterable[str]):
        self.fields = sorted(fields)
        super().__init__(f"Unknown field(s) for {entity}: {', '.join(self.fields)}")
        self.entity = entity


class TypeCoercionError(HireHubError):
    """Patch value cannot be converted to the field's declared type."""

    status_code = 422

    def __init__(self, entity: str, field: str, reason: str):
        super().__init__(f"Invalid value for {entity}.{field}: {reason}")
        self.entity = entity
        self.field = field


class DuplicateConstraintError(HireHubError):
    """A uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT


class ConcurrentUpdateError(HireHubError):
    """The row changed since it was read (optimistic locking)."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} {key} was modified concurrently; reload and retry")
        self.entity = entity
        self.key = key


class AuthenticationError(HireHubError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(HireHubError):
    status_code = status.HTTP_403_FORBIDDEN


def _error_response(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": correlation_id.get(),
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(HireHubError)
    async def domain_exception_handler(request: Request, exc: HireHubError) -> JSONResponse:
        logger.info(
            "Request failed",
            error=type(exc).__name__,
            detail=exc.detail,
            path=request.url.path,
        )
        response = _error_response(exc.status_code, exc.detail)
        if isinstance(exc, AuthenticationError):
            response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
