"""Unit tests for the reply notification dispatcher."""

import asyncio

import pytest

from masacarri.adapter.mail import MailNotificationDispatcher, MockMailClient
from masacarri.config import NotificationSettings
from masacarri.domain.service import ReplyNotificationTask
from masacarri.persistence.repository.inmemory import (
    InMemoryRepositoryScope,
    InMemoryStore,
)
from tests.conftest import make_comment, make_page


def seed(store: InMemoryStore, mail_addr: str | None = "author@example.com"):
    """Store a page with a comment and a reply to it; return the reply task."""
    page = make_page()
    parent = make_comment(page.id, "original", mail_addr=mail_addr)
    reply = make_comment(page.id, "answer", reply_to=parent.id, minutes=1)
    store.pages[page.id] = page
    store.comments[parent.id] = parent
    store.comments[reply.id] = reply
    return page, ReplyNotificationTask(reply_to_id=parent.id, comment=reply)


def make_dispatcher(store: InMemoryStore, client: MockMailClient, retry: int = 3):
    return MailNotificationDispatcher(
        mail_client=client,
        repository_scope=InMemoryRepositoryScope(store),
        settings=NotificationSettings(retry=retry, workers=2, site_name="Blog"),
    )


class TestDeliver:
    """Tests for a single delivery."""

    @pytest.mark.asyncio
    async def test_mails_replied_to_author(self):
        store = InMemoryStore()
        page, task = seed(store)
        client = MockMailClient()

        delivered = await make_dispatcher(store, client).deliver(task)

        assert delivered is True
        assert len(client.sent) == 1
        message = client.sent[0]
        assert message.recipient == "author@example.com"
        assert message.subject == "Blog: Your comment got a reply"
        assert message.body == f"Check reply to your comment: {page.page_url}"

    @pytest.mark.asyncio
    async def test_retries_until_success(self):
        store = InMemoryStore()
        _, task = seed(store)
        client = MockMailClient(failures=2)

        delivered = await make_dispatcher(store, client, retry=3).deliver(task)

        assert delivered is True
        assert client.attempts == 3
        assert len(client.sent) == 1

    @pytest.mark.asyncio
    async def test_gives_up_after_retry_attempts(self):
        store = InMemoryStore()
        _, task = seed(store)
        client = MockMailClient(failures=5)

        delivered = await make_dispatcher(store, client, retry=3).deliver(task)

        assert delivered is False
        assert client.attempts == 3
        assert client.sent == []

    @pytest.mark.asyncio
    async def test_no_mail_address_is_dropped(self):
        store = InMemoryStore()
        _, task = seed(store, mail_addr=None)
        client = MockMailClient()

        delivered = await make_dispatcher(store, client).deliver(task)

        assert delivered is False
        assert client.attempts == 0

    @pytest.mark.asyncio
    async def test_deleted_page_is_dropped(self):
        store = InMemoryStore()
        page, task = seed(store)
        del store.pages[page.id]
        client = MockMailClient()

        delivered = await make_dispatcher(store, client).deliver(task)

        assert delivered is False
        assert client.attempts == 0


class TestWorkerPool:
    """Tests for the queue and its workers."""

    @pytest.mark.asyncio
    async def test_submitted_tasks_are_delivered(self):
        store = InMemoryStore()
        _, first = seed(store)
        _, second = seed(store)
        client = MockMailClient()
        dispatcher = make_dispatcher(store, client)

        await dispatcher.start()
        try:
            dispatcher.submit(first)
            dispatcher.submit(second)
            await asyncio.wait_for(dispatcher.join(), timeout=5)
        finally:
            await dispatcher.stop()

        assert len(client.sent) == 2

    @pytest.mark.asyncio
    async def test_failed_delivery_does_not_stop_workers(self):
        store = InMemoryStore()
        _, first = seed(store)
        _, second = seed(store)
        client = MockMailClient(failures=1)
        dispatcher = make_dispatcher(store, client, retry=1)

        await dispatcher.start()
        try:
            dispatcher.submit(first)
            await asyncio.wait_for(dispatcher.join(), timeout=5)
            dispatcher.submit(second)
            await asyncio.wait_for(dispatcher.join(), timeout=5)
        finally:
            await dispatcher.stop()

        assert client.attempts == 2
        assert len(client.sent) == 1

    def test_submit_before_start_raises(self):
        store = InMemoryStore()
        _, task = seed(store)
        dispatcher = make_dispatcher(store, MockMailClient())

        with pytest.raises(RuntimeError):
            dispatcher.submit(task)

    @pytest.mark.asyncio
    async def test_worker_without_queue_raises(self):
        dispatcher = make_dispatcher(InMemoryStore(), MockMailClient())

        with pytest.raises(RuntimeError, match="not running"):
            await dispatcher._work()
