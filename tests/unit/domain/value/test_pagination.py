"""Unit tests for listing pagination and scope selection."""

from uuid import uuid4

import pytest

from masacarri.domain.error import ValidationError
from masacarri.domain.value import (
    CommentId,
    ContextScope,
    FullPage,
    Pagination,
    ReplyScope,
    comment_scope,
)


class TestPagination:
    """Tests for Pagination.create."""

    def test_defaults(self):
        pagination = Pagination.create()

        assert pagination.per_page == 10
        assert pagination.page_index == 1
        assert pagination.offset == 0
        assert pagination.limit == 10

    def test_offset_is_zero_based(self):
        pagination = Pagination.create(per_page=20, page_index=3)

        assert pagination.offset == 40
        assert pagination.limit == 20

    @pytest.mark.parametrize("per_page", [1, 256])
    def test_bounds_are_inclusive(self, per_page):
        assert Pagination.create(per_page=per_page).per_page == per_page

    @pytest.mark.parametrize("per_page", [0, 257, -1])
    def test_page_size_out_of_range(self, per_page):
        with pytest.raises(ValidationError) as exc_info:
            Pagination.create(per_page=per_page)

        assert exc_info.value.message == "Comments per page is limited up to 256."

    @pytest.mark.parametrize("page_index", [0, -3])
    def test_page_index_below_one(self, page_index):
        with pytest.raises(ValidationError) as exc_info:
            Pagination.create(page_index=page_index)

        assert exc_info.value.message == "invalid page index"

    def test_configured_limits(self):
        pagination = Pagination.create(default_per_page=25, max_per_page=50)
        assert pagination.per_page == 25

        with pytest.raises(ValidationError) as exc_info:
            Pagination.create(per_page=51, max_per_page=50)
        assert exc_info.value.message == "Comments per page is limited up to 50."


class TestCommentScope:
    """Tests for comment_scope selection."""

    def test_no_identifier_is_full_page(self):
        assert comment_scope() == FullPage()

    def test_reply_to(self):
        comment_id = CommentId(uuid4())
        assert comment_scope(reply_to=comment_id) == ReplyScope(comment_id=comment_id)

    def test_context_of(self):
        comment_id = CommentId(uuid4())
        assert comment_scope(context_of=comment_id) == ContextScope(
            comment_id=comment_id
        )

    def test_both_identifiers_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            comment_scope(reply_to=CommentId(uuid4()), context_of=CommentId(uuid4()))

        assert (
            exc_info.value.message
            == "'replyto' and 'contextof' are not allowed to use simultaneously."
        )
