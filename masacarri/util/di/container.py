"""Dependency injection container."""

from typing import AbstractSet

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from masacarri.util.di import Component, select_providers


def create_container(mocked: AbstractSet[Component] = frozenset()) -> AsyncContainer:
    """Build the application container.

    Settings are read from the environment when first requested. Closing
    the container stops the notification workers and disposes the engine.

    Args:
        mocked: Components to replace with their mock implementations
    """
    return make_async_container(*select_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can resolve ``FromDishka`` parameters."""
    setup_dishka(container, app)
