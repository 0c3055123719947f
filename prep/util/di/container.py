"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from prep.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: set[Component] | None = None) -> AsyncContainer:
    """Build the DI container.

    Production passes nothing and gets real implementations everywhere.
    Components listed in mocked use their mock provider instead. Mock
    providers live in tests/di and must be imported before this is called.

    Args:
        mocked: Components to replace with mocks

    Returns:
        Container with FastAPI integration

    Raises:
        ValueError: If a mocked component has no mock provider
    """
    mocked = mocked or set()
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's DishkaRoute handlers from container.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
