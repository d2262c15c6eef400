"""
Cookbook FastAPI Application
Main entry point with middleware, exception handlers and configuration management
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import entries, summary, parse, health
from app.config import settings as default_settings, Settings
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    cookbook_exception_handler,
    general_exception_handler,
)
from app.exceptions import CookbookError
from repositories.cookbook_repository import CookbookRepository

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper()),
    format=default_settings.log_format,
)
_logger = logging.getLogger("cookbook.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the cookbook lives exactly as long as the app."""
    _logger.info(
        f"Starting {app.state.settings.app_name} in {app.state.settings.environment.value} mode"
    )
    try:
        yield
    finally:
        _logger.info(
            f"Shutting down {app.state.settings.app_name} "
            f"with {len(app.state.repository)} entries"
        )


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[CookbookRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI application around a cookbook.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        repository: Cookbook to serve (defaults to a new, empty one)
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.repository = repository if repository is not None else CookbookRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(CookbookError, cookbook_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(parse.router, prefix=settings.api_prefix)
    app.include_router(entries.router, prefix=settings.api_prefix)
    app.include_router(summary.router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
