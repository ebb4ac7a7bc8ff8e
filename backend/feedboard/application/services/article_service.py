"""Application service (use case) for Article operations."""

import logging

from feedboard.application.interfaces import ArticleRepository
from feedboard.application.schemas import ArticleCreate
from feedboard.domain.coercion import normalize_author
from feedboard.domain.entities import Article, ArticleDraft

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Anónimo"


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, default_author: str = DEFAULT_AUTHOR):
        self._repository = repository
        self._default_author = default_author

    async def list_articles(self) -> list[Article]:
        """All articles, newest first.

        ``sorted`` is stable, so records sharing a timestamp keep store order.
        """
        articles = await self._repository.get_all()
        return sorted(articles, key=lambda a: a.created_at, reverse=True)

    async def create_article(self, data: ArticleCreate) -> Article:
        draft = ArticleDraft(
            title=data.title,
            description=data.description,
            author=normalize_author(data.author, self._default_author),
            views=data.views,
        )
        article = await self._repository.create(draft)
        logger.info("Created article %s (%r)", article.id, article.title)
        return article
