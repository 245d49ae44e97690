"""Application layer DI providers."""

from dishka import Scope, provide

from guide.application.usecase.article import (
    CreateArticleUseCase,
    GetArticleUseCase,
    ListCategoryArticlesUseCase,
)
from guide.application.usecase.category import ListCategoriesUseCase
from guide.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from guide.application.usecase.reaction import (
    GetReactionCountUseCase,
    ToggleReactionUseCase,
)
from guide.application.usecase.saved import (
    ListSavedArticlesUseCase,
    ToggleSavedArticleUseCase,
)
from guide.application.usecase.subscription import (
    ListSubscribersUseCase,
    ListSubscriptionsUseCase,
    ToggleSubscriptionUseCase,
)
from guide.application.usecase.user import GetProfileUseCase, UpdateProfileUseCase
from guide.domain.service import (
    AggregationService,
    ArticleService,
    CategoryService,
    CommentService,
    LookupService,
    RelationshipService,
    UserService,
)
from guide.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_create_article_use_case(
        self, article_service: ArticleService, lookup_service: LookupService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service, lookup_service=lookup_service
        )

    @provide(scope=Scope.REQUEST)
    def get_article_use_case(self, lookup_service: LookupService) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(lookup_service=lookup_service)

    @provide(scope=Scope.REQUEST)
    def get_list_category_articles_use_case(
        self, article_service: ArticleService, lookup_service: LookupService
    ) -> ListCategoryArticlesUseCase:
        """Provide list category articles use case."""
        return ListCategoryArticlesUseCase(
            article_service=article_service, lookup_service=lookup_service
        )

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService, lookup_service: LookupService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(
            category_service=category_service, lookup_service=lookup_service
        )

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_reaction_use_case(
        self,
        relationship_service: RelationshipService,
        lookup_service: LookupService,
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(
            relationship_service=relationship_service, lookup_service=lookup_service
        )

    @provide(scope=Scope.REQUEST)
    def get_reaction_count_use_case(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> GetReactionCountUseCase:
        """Provide reaction count use case."""
        return GetReactionCountUseCase(
            aggregation_service=aggregation_service, lookup_service=lookup_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, lookup_service: LookupService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, lookup_service=lookup_service
        )

    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self, comment_service: CommentService, lookup_service: LookupService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, lookup_service=lookup_service
        )

    # Saved article use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_saved_article_use_case(
        self, relationship_service: RelationshipService
    ) -> ToggleSavedArticleUseCase:
        """Provide toggle saved article use case."""
        return ToggleSavedArticleUseCase(relationship_service=relationship_service)

    @provide(scope=Scope.REQUEST)
    def get_list_saved_articles_use_case(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> ListSavedArticlesUseCase:
        """Provide list saved articles use case."""
        return ListSavedArticlesUseCase(
            aggregation_service=aggregation_service, lookup_service=lookup_service
        )

    # Subscription use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_subscription_use_case(
        self, relationship_service: RelationshipService
    ) -> ToggleSubscriptionUseCase:
        """Provide toggle subscription use case."""
        return ToggleSubscriptionUseCase(relationship_service=relationship_service)

    @provide(scope=Scope.REQUEST)
    def get_list_subscribers_use_case(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> ListSubscribersUseCase:
        """Provide list subscribers use case."""
        return ListSubscribersUseCase(
            aggregation_service=aggregation_service, lookup_service=lookup_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_subscriptions_use_case(
        self,
        aggregation_service: AggregationService,
        lookup_service: LookupService,
    ) -> ListSubscriptionsUseCase:
        """Provide list subscriptions use case."""
        return ListSubscriptionsUseCase(
            aggregation_service=aggregation_service, lookup_service=lookup_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(self, lookup_service: LookupService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(lookup_service=lookup_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)
