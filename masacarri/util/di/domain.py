"""Domain service providers."""

from dishka import Scope, provide

from masacarri.domain.repository import (
    CommentRepository,
    PageRepository,
    UserRepository,
)
from masacarri.domain.service import (
    CommentService,
    HashingService,
    JWTService,
    NotificationQueue,
    PageService,
    UserService,
)
from masacarri.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services.

    Stateless helpers live as long as the container; services holding a
    repository follow the request, and with it the database session.
    """

    scope = Scope.REQUEST

    hashing_service = provide(HashingService, scope=Scope.APP)
    jwt_service = provide(JWTService, scope=Scope.APP)

    @provide
    def comment_service(
        self,
        comment_repository: CommentRepository,
        hashing_service: HashingService,
        notification_queue: NotificationQueue,
    ) -> CommentService:
        return CommentService(
            comment_repository=comment_repository,
            hashing_service=hashing_service,
            notification_queue=notification_queue,
        )

    @provide
    def page_service(self, page_repository: PageRepository) -> PageService:
        return PageService(page_repository=page_repository)

    @provide
    def user_service(
        self, user_repository: UserRepository, hashing_service: HashingService
    ) -> UserService:
        return UserService(
            user_repository=user_repository, hashing_service=hashing_service
        )
