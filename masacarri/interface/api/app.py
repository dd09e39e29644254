"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from masacarri.config import Settings
from masacarri.interface.api.routes import auth, comments, health, pages
from masacarri.interface.error import register_error_handlers
from masacarri.util.di.container import create_container, setup_di
from masacarri.util.error import ConfigurationError
from masacarri.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Stops the notification workers and disposes the engine
    await app.state.dishka_container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container, production container when omitted
        settings: Settings for CORS, routing and static files, loaded from
            the environment when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Masacarri API",
        description="Comment hosting service: pages, threaded comments and reply notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # The embed widget and admin front end post with the session cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    prefix = settings.api.prefix
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=prefix)
    app_instance.include_router(pages.router, prefix=prefix)
    app_instance.include_router(comments.router, prefix=prefix)

    # Mounted last so API routes win
    if settings.frontend_dist is not None:
        if not settings.frontend_dist.is_dir():
            raise ConfigurationError(
                "frontend_dist", f"{settings.frontend_dist} is not a directory"
            )
        app_instance.mount(
            "/",
            StaticFiles(directory=settings.frontend_dist, html=True),
            name="frontend",
        )

    return app_instance
