"""FastAPI dependency injection — wires infrastructure to application layer."""

from fastapi import Depends, Request

from feedboard.config import Settings, get_settings
from feedboard.application.interfaces import ArticleRepository
from feedboard.application.services import ArticleService
from feedboard.infrastructure.database import create_engine
from feedboard.infrastructure.database.repositories import SQLAlchemyArticleRepository
from feedboard.infrastructure.memory import InMemoryArticleRepository


def build_article_repository(settings: Settings) -> ArticleRepository:
    """Construct the store backing selected by ``ARTICLE_STORE``."""
    if settings.article_store == "sql":
        engine = create_engine(settings.database_url)
        return SQLAlchemyArticleRepository(engine)
    return InMemoryArticleRepository()


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_article_repository(request: Request) -> ArticleRepository:
    """The store instance owned by the running application."""
    return request.app.state.article_repository


def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
    settings: Settings = Depends(get_app_settings),
) -> ArticleService:
    """Provides an ArticleService bound to the application's store."""
    return ArticleService(repository, default_author=settings.default_author)
