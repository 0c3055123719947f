"""FastAPI application.

Logfire must be configured before this module is imported. In production
scripts/start_app.py does it, in tests tests/conftest.py does.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prep.config import Settings
from prep.interface.api.routes import (
    admin,
    auth,
    courses,
    health,
    parse_question,
    questions,
    users,
)
from prep.util.di.container import create_container, setup_di
from prep.util.observability import instrument_fastapi, instrument_httpx

API_PREFIX = "/api"
API_ROUTERS = (admin, auth, courses, questions, users, parse_question)
LOCAL_FRONTEND = "http://localhost:3000"


def cors_origins(settings: Settings) -> list[str]:
    """Origins allowed to call the API with credentials."""
    return list(dict.fromkeys([settings.api.frontend_url, LOCAL_FRONTEND]))


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve requests from. When omitted the
            production container is built and closed on shutdown. A
            container passed in stays owned by the caller.

    Returns:
        Configured application
    """
    settings = Settings()
    owns_container = container is None
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_container:
            await container.close()

    instrument_httpx()

    app_instance = FastAPI(
        title="Prep API",
        description="Interview practice courses, questions and progress tracking",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Session cookies are sent cross-origin, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    for module in API_ROUTERS:
        app_instance.include_router(module.router, prefix=API_PREFIX)

    return app_instance


app = create_app()
