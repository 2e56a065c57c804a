"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import DEFAULT_JWT_SECRET, Settings
from qna.interface.api.errors import register_error_handlers
from qna.interface.api.routes import (
    answers,
    comments,
    health,
    questions,
    tags,
    users,
)
from qna.util.di.container import create_container, setup_di
from qna.util.error import ConfigurationError
from qna.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container, the production container when omitted

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if settings.environment == "production" and (
        settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="Q&A API",
        description="Backend API for a question and answer site",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Session cookies need credentials on cross-origin requests
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tags.router)

    return app_instance
