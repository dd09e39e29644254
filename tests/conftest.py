"""Test configuration and fixtures."""

import ipaddress
import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from masacarri.domain.model import Comment, Page
from masacarri.domain.value import CommentId, PageId

# Cheap bcrypt for tests; must be set before Settings() is first built
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_page(title: str = "Hello world", published: bool = True) -> Page:
    """Build a page with a fresh ID."""
    page_id = PageId(uuid4())
    return Page(
        id=page_id,
        title=title,
        page_url=f"https://blog.example.com/{page_id}",
        published=published,
    )


def make_comment(
    page_id: PageId,
    content: str = "Nice post",
    reply_to: CommentId | None = None,
    minutes: int = 0,
    flags: int = 0,
    mail_addr: str | None = None,
) -> Comment:
    """Build a stored comment created ``minutes`` after a fixed base time."""
    return Comment(
        id=CommentId(uuid4()),
        page_id=page_id,
        reply_to=reply_to,
        ip_addr=ipaddress.ip_network("192.0.2.1"),
        display_name="Visitor",
        content=content,
        flags=flags,
        mail_addr=mail_addr,
        created_time=BASE_TIME + timedelta(minutes=minutes),
    )
