#!/usr/bin/env python3
"""Administration commands for Masacarri.

Usage:
    manage.py adduser <username>
    manage.py deluser <username>
    manage.py passwd <username>
    manage.py list users
    manage.py list pages

Passwords are read from the terminal. Commands run against the database
configured through ``DATABASE__URL``.
"""

import argparse
import asyncio
import getpass
import sys

import logfire

from masacarri.config import Settings
from masacarri.domain.error import NotFoundError, ValidationError
from masacarri.domain.service import HashingService, PageService, UserService
from masacarri.domain.value import Username
from masacarri.persistence.database import create_engine, create_session_factory
from masacarri.persistence.repository import (
    PostgresPageRepository,
    PostgresUserRepository,
)
from masacarri.util.observability import configure_logfire


def read_password() -> str:
    """Prompt twice for a new password."""
    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Confirm password: "):
        raise ValidationError("Passwords do not match.")
    return password


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manage.py", description="Administration commands for Masacarri."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("adduser", "Create an administrator account"),
        ("deluser", "Delete an administrator account"),
        ("passwd", "Change an administrator's password"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("username")

    listing = commands.add_parser("list", help="List users or pages")
    listing.add_argument("target", choices=["users", "pages"])

    return parser


async def run(args: argparse.Namespace, settings: Settings) -> None:
    """Execute one command inside a single transaction."""
    engine = create_engine(settings.database)
    session_factory = create_session_factory(engine)
    hashing_service = HashingService(settings.auth)

    try:
        async with session_factory() as session:
            users = UserService(PostgresUserRepository(session), hashing_service)

            if args.command == "list" and args.target == "users":
                for user in await users.list_users():
                    print(user.username.root)
            elif args.command == "list":
                pages = PageService(PostgresPageRepository(session))
                for page in await pages.list_pages():
                    state = "published" if page.published else "draft"
                    print(f"{page.id}\t{state}\t{page.title}\t{page.page_url}")
            elif args.command == "adduser":
                await users.create_user(Username(args.username), read_password())
            elif args.command == "passwd":
                await users.change_password(Username(args.username), read_password())
            elif args.command == "deluser":
                await users.delete_user(Username(args.username))

            await session.commit()
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(run(args, settings))
    except (ValidationError, NotFoundError, ValueError) as e:
        # ValueError: malformed username
        print(f"error: {e}", file=sys.stderr)
        return 1

    logfire.info("Management command finished", command=args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
