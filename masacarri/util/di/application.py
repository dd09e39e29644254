"""Application layer DI providers."""

from dishka import Scope, provide

from masacarri.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from masacarri.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    MarkCommentUseCase,
)
from masacarri.application.usecase.page import (
    CreatePageUseCase,
    DeletePageUseCase,
    ListPagesUseCase,
    UpdatePageUseCase,
)
from masacarri.config import CommentSettings
from masacarri.domain.service import (
    CommentService,
    JWTService,
    PageService,
    UserService,
)
from masacarri.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, page_service: PageService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, page_service=page_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_comment_use_case(self) -> MarkCommentUseCase:
        """Provide mark comment use case."""
        return MarkCommentUseCase()

    # Page use cases
    @provide(scope=Scope.REQUEST)
    def get_list_pages_use_case(self, page_service: PageService) -> ListPagesUseCase:
        """Provide list pages use case."""
        return ListPagesUseCase(page_service=page_service)

    @provide(scope=Scope.REQUEST)
    def get_create_page_use_case(
        self, page_service: PageService
    ) -> CreatePageUseCase:
        """Provide create page use case."""
        return CreatePageUseCase(page_service=page_service)

    @provide(scope=Scope.REQUEST)
    def get_update_page_use_case(
        self, page_service: PageService
    ) -> UpdatePageUseCase:
        """Provide update page use case."""
        return UpdatePageUseCase(page_service=page_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_page_use_case(
        self, page_service: PageService
    ) -> DeletePageUseCase:
        """Provide delete page use case."""
        return DeletePageUseCase(page_service=page_service)
