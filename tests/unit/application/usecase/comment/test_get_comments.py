"""Unit tests for the comment reading use cases."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from masacarri.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from masacarri.domain.error import NotFoundError, ValidationError
from masacarri.domain.repository import CommentRepository, PageRepository
from masacarri.domain.value.types import SCOPE_CONFLICT_MESSAGE
from tests.conftest import make_comment, make_page
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(unit_env: AsyncContainer, count: int = 12):
    """Store a page with ``count`` top-level comments, one minute apart."""
    page = make_page()
    await (await unit_env.get(PageRepository)).insert(page)
    comment_repo = await unit_env.get(CommentRepository)
    comments = [make_comment(page.id, f"#{i}", minutes=i) for i in range(count)]
    for comment in comments:
        await comment_repo.insert(comment)
    return page, comments


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_default_page_size(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(page_id=page.id))

        assert [c.id for c in response.comments] == [c.id for c in comments[:10]]
        assert all(c.count_replies == 0 for c in response.comments)

    @pytest.mark.asyncio
    async def test_second_page(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(page_id=page.id, per_page=5, page_index=2)
        )

        assert [c.id for c in response.comments] == [c.id for c in comments[5:10]]

    @pytest.mark.asyncio
    async def test_page_size_over_limit(self, unit_env: AsyncContainer):
        page, _ = await seed(unit_env, count=1)
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(GetCommentsRequest(page_id=page.id, per_page=257))

        assert exc_info.value.message == "Comments per page is limited up to 256."

    @pytest.mark.asyncio
    async def test_both_scopes_rejected(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env, count=1)
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                GetCommentsRequest(
                    page_id=page.id,
                    reply_to=comments[0].id,
                    context_of=comments[0].id,
                )
            )

        assert exc_info.value.message == (
            "'replyto' and 'contextof' are not allowed to use simultaneously."
        )


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_found(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env, count=1)
        use_case = await unit_env.get(GetCommentUseCase)

        item = await use_case.execute(
            GetCommentRequest(page_id=page.id, comment_id=comments[0].id)
        )

        assert item.id == comments[0].id
        assert item.count_replies == 0

    @pytest.mark.asyncio
    async def test_missing(self, unit_env: AsyncContainer):
        page, _ = await seed(unit_env, count=1)
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                GetCommentRequest(page_id=page.id, comment_id=uuid4())
            )

        assert exc_info.value.resource == "comment"


class TestCountCommentsUseCase:
    """Tests for CountCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_counts_whole_page(self, unit_env: AsyncContainer):
        page, _ = await seed(unit_env, count=3)
        use_case = await unit_env.get(CountCommentsUseCase)

        response = await use_case.execute(CountCommentsRequest(page_id=page.id))

        assert response.count == 3

    @pytest.mark.asyncio
    async def test_counts_context(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env, count=1)
        comment_repo = await unit_env.get(CommentRepository)
        reply = make_comment(page.id, "reply", reply_to=comments[0].id, minutes=1)
        await comment_repo.insert(reply)
        use_case = await unit_env.get(CountCommentsUseCase)

        response = await use_case.execute(
            CountCommentsRequest(page_id=page.id, context_of=reply.id)
        )

        assert response.count == 2

    @pytest.mark.asyncio
    async def test_both_scopes_rejected(self, unit_env: AsyncContainer):
        page, comments = await seed(unit_env, count=1)
        use_case = await unit_env.get(CountCommentsUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CountCommentsRequest(
                    page_id=page.id,
                    reply_to=comments[0].id,
                    context_of=comments[0].id,
                )
            )

        assert exc_info.value.message == SCOPE_CONFLICT_MESSAGE
