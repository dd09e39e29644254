#!/usr/bin/env python3
"""Apply or roll back database migrations with Logfire error tracking.

Usage:
    run_migrations.py                 # upgrade to head
    run_migrations.py --revision X    # upgrade to X
    run_migrations.py --downgrade X   # downgrade to X
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from masacarri.config import Settings
from masacarri.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    """Run migrations and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description="Run Alembic migrations")
    parser.add_argument("--revision", default="head", help="Upgrade target")
    parser.add_argument("--downgrade", metavar="REVISION", help="Downgrade target")
    parser.add_argument("--config", default="alembic.ini", help="Alembic ini file")
    args = parser.parse_args(argv)

    configure_logfire(Settings())
    alembic_cfg = Config(args.config)

    try:
        if args.downgrade:
            logfire.info("Downgrading database", revision=args.downgrade)
            command.downgrade(alembic_cfg, args.downgrade)
        else:
            logfire.info("Upgrading database", revision=args.revision)
            command.upgrade(alembic_cfg, args.revision)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
