"""Create article use case."""

from uuid import UUID

from pydantic import BaseModel

from guide.application.usecase.base import BaseUseCase
from guide.application.view import ArticleView
from guide.domain.service import ArticleService, LookupService
from guide.domain.value import CategoryName, UserId


class CreateArticleRequest(BaseModel):
    """Create article request."""

    viewer_id: str  # Author, from authenticated user
    category_name: str
    title: str
    text: str
    description: str = ""
    is_draft: bool = False


class CreateArticleResponse(BaseModel):
    """Create article response."""

    article: ArticleView


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing (or drafting) an article in a category."""

    def __init__(
        self, article_service: ArticleService, lookup_service: LookupService
    ) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article domain service
            lookup_service: Lookup domain service
        """
        self.article_service = article_service
        self.lookup_service = lookup_service

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute create article flow.

        Steps:
        1. Resolve the author
        2. Create the article (resolves the category by name)
        3. Return the article view for the author

        Raises:
            NotFoundError: If the author or category does not exist
        """
        author = await self.lookup_service.user(UserId(UUID(request.viewer_id)))

        article = await self.article_service.create_article(
            author=author,
            category_name=CategoryName(request.category_name),
            title=request.title,
            text=request.text,
            description=request.description,
            is_draft=request.is_draft,
        )
        category = await self.lookup_service.category(article.category_id)

        return CreateArticleResponse(
            article=ArticleView.from_domain(article, category, author.id)
        )
