"""Standard-library logging setup.

Application code logs through logfire. This only concerns libraries that
use ``logging`` directly: uvicorn, SQLAlchemy, alembic and asyncpg.
"""

import logging
import sys

from masacarri.config import Settings

# Library loggers and their levels outside debug mode
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Route library logs to stdout.

    In debug mode everything logs at DEBUG, which also prints SQL
    statements through ``sqlalchemy.engine``.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
