"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    SparkError,
    ValidationError,
)
from .routes import health, users
from modules.assistant.routes import router as assistant_router
from modules.members.routes import router as members_router
from modules.signup.routes import router as signup_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    logger.info(f"Starting Spark API on {settings.host}:{settings.port}")
    yield
    logger.info("Shutting down Spark API")


def status_for(error: SparkError) -> int:
    """Map an application error to its HTTP status code."""
    if isinstance(error, (AuthenticationError, AuthorizationError)):
        return 401
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    return 500


async def spark_error_handler(request: Request, exc: SparkError) -> JSONResponse:
    """Render application errors as {"error": message}."""
    status_code = status_for(exc)
    if isinstance(exc, ExternalServiceError):
        logger.warning(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 {"error": message}."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Chapter membership, role approval and assistant API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(SparkError, spark_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(members_router, prefix="/api/admin/users", tags=["admin"])
    app.include_router(signup_router, prefix="/api/signup", tags=["signup"])
    app.include_router(assistant_router, prefix="/api/assistant", tags=["assistant"])

    return app


# Application instance for uvicorn
app = create_app()
