"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_records import __version__
from student_records.api.dependencies import close_student_service, init_student_service
from student_records.api.errors import register_exception_handlers
from student_records.api.routes import health, students
from student_records.config import Settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Students live only as long as the process: each startup begins with an
    empty store.
    """
    # Startup
    init_student_service()
    logger.info("Student store initialized")

    yield
    # Shutdown
    close_student_service()
    logger.info("Student store closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Student Records API",
        description="REST API for managing student records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(students.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


# Default app instance
app = create_app()
