from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.hirehub.api.dependencies import DBSession
from src.hirehub.api.middlewares import setup_middlewares
from src.hirehub.api.v1.router import api_router
from src.hirehub.core.config import get_settings
from src.hirehub.core.db import create_tables, dispose_engine
from src.hirehub.core.exceptions import setup_exception_handlers
from src.hirehub.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    if settings.database_create_tables:
        await create_tables()
        logger.info("Database tables created")

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Login for company and user accounts"},
    {"name": "companies", "description": "Company accounts and registration details"},
    {"name": "users", "description": "User accounts and public profiles"},
    {"name": "projects", "description": "Projects and tech-tag search"},
    {"name": "estimates", "description": "Company ratings of users"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Recruiting platform API: companies, users, projects and tech tags",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    @app.get("/health")
    async def health(session: DBSession) -> JSONResponse:
        """Health check with database validation."""
        try:
            await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": f"unhealthy: {e}"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


app = create_app()
