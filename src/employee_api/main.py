"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import get_settings
from employee_api.constants.paths import EMPLOYEE_BASE_PATH, HEALTH_PATH
from employee_api.exceptions import EmployeeAPIError
from employee_api.logging_config import configure_logging
from employee_api.middleware.error_handler import (
    employee_api_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from employee_api.middleware.request_id_middleware import RequestIDMiddleware
from employee_api.routers import employees

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    from employee_api.database import engine, init_models

    config = get_settings()
    if config.create_tables_on_startup:
        await init_models()
        logger.info("Database tables verified")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_settings()
    configure_logging(config)

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employee CRUD API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # Every error leaves the API in the ErrorResponse shape
    app.add_exception_handler(EmployeeAPIError, employee_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(RequestIDMiddleware)

    app.include_router(employees.router, prefix=EMPLOYEE_BASE_PATH, tags=["Employees"])

    @app.get(HEALTH_PATH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
