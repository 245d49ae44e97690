"""Domain layer DI providers."""

from dishka import Scope, provide

from guide.config import AuthSettings
from guide.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    CommentRepository,
    UserRepository,
)
from guide.domain.service import (
    AggregationService,
    ArticleService,
    CategoryService,
    CommentService,
    JWTService,
    LookupService,
    RelationshipService,
    UserService,
)
from guide.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle: each HTTP request gets fresh services sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_lookup_service(
        self,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
        category_repository: CategoryRepository,
    ) -> LookupService:
        """Provide lookup (not-found guard) domain service."""
        return LookupService(
            user_repository=user_repository,
            article_repository=article_repository,
            category_repository=category_repository,
        )

    @provide
    def get_relationship_service(
        self,
        lookup_service: LookupService,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> RelationshipService:
        """Provide relationship toggle domain service."""
        return RelationshipService(
            lookup_service=lookup_service,
            user_repository=user_repository,
            article_repository=article_repository,
        )

    @provide
    def get_aggregation_service(
        self,
        lookup_service: LookupService,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> AggregationService:
        """Provide aggregation domain service."""
        return AggregationService(
            lookup_service=lookup_service,
            user_repository=user_repository,
            article_repository=article_repository,
        )

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository, lookup_service: LookupService
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository, lookup_service=lookup_service
        )

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, lookup_service: LookupService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, lookup_service=lookup_service
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, lookup_service: LookupService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, lookup_service=lookup_service
        )
