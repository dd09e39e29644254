"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from masacarri.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from masacarri.domain.error import ValidationError
from masacarri.domain.repository import PageRepository
from masacarri.domain.service import NotificationQueue
from tests.conftest import make_page
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_top_level_comment(self, unit_env: AsyncContainer):
        page = make_page()
        await (await unit_env.get(PageRepository)).insert(page)
        use_case = await unit_env.get(CreateCommentUseCase)

        item = await use_case.execute(
            CreateCommentRequest(
                page_id=page.id,
                display_name="Alice",
                content="First!",
                submitter_ip="198.51.100.7",
                site_url="",
            )
        )

        assert item.page_id == page.id
        assert item.reply_to is None
        assert item.display_name == "Alice"
        assert item.content == "First!"
        assert item.site_url is None
        assert item.count_replies is None

    @pytest.mark.asyncio
    async def test_reply_is_handed_to_notification_queue(
        self, unit_env: AsyncContainer
    ):
        page = make_page()
        await (await unit_env.get(PageRepository)).insert(page)
        use_case = await unit_env.get(CreateCommentUseCase)
        queue = await unit_env.get(NotificationQueue)

        parent = await use_case.execute(
            CreateCommentRequest(
                page_id=page.id,
                display_name="Alice",
                content="Question?",
                submitter_ip="198.51.100.7",
                mail_addr="alice@example.com",
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                page_id=page.id,
                display_name="Bob",
                content="Answer.",
                submitter_ip="198.51.100.8",
                reply_to=parent.id,
            )
        )

        assert reply.reply_to == parent.id
        assert [task.reply_to_id for task in queue.tasks] == [parent.id]

    @pytest.mark.asyncio
    async def test_unknown_page_is_rejected(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    page_id=uuid4(),
                    display_name="Alice",
                    content="Hello?",
                    submitter_ip="198.51.100.7",
                )
            )

        assert exc_info.value.message == "You commented on an invalid page."
