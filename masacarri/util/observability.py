"""Tracing and structured logs through Logfire.

Application code logs with ``logfire.info(...)`` and wraps units of work in
``logfire.span(...)``; the helpers here configure the SDK once per process
and hook it into FastAPI and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from masacarri.config import Settings

# Polled by load balancers; not worth a trace per probe
UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting first, otherwise send only when a token exists."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Without a token or an explicit ``OBSERVABILITY__SEND_TO_LOGFIRE=true``
    everything stays on the console.
    """
    logfire.configure(
        service_name="masacarri",
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=_send_to_logfire(settings),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagging spans with the peer address.

    The peer address is what new comments record as their submitter, so it
    is kept on the span for moderation.
    """

    def _request_attributes(request, attributes):
        client = getattr(request, "client", None)
        if client is None:
            return attributes
        return {**attributes, "client_host": client.host}

    logfire.instrument_fastapi(
        app,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
