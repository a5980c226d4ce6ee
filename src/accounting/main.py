"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from accounting.config.settings import get_settings
from accounting.config.logging_config import setup_logging
from accounting.repositories.sqlalchemy.database import init_db
from accounting.api.routers import accounts_router
from accounting.core.exceptions import AppError, NotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Chart of accounts storage and maintenance",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(accounts_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violations reported by the database."""
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content={"error": "CONSTRAINT_VIOLATION", "message": str(exc.orig)},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
