#!/usr/bin/env python3
"""Serve the API with uvicorn.

Startup failures (bad settings, unreachable database on first request,
missing front end directory) are reported to Logfire before exiting.
"""

import sys

import logfire
import uvicorn

from masacarri.config import Settings
from masacarri.util.logging import setup_logging
from masacarri.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Masacarri",
        environment=settings.environment,
        port=settings.port,
        frontend_dist=str(settings.frontend_dist) if settings.frontend_dist else None,
    )
    try:
        uvicorn.run(
            "masacarri.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("Masacarri failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
