"""Process-local article store, the default backing."""

import asyncio
import logging
import uuid
from dataclasses import replace
from datetime import datetime

from feedboard.application.interfaces import ArticleRepository
from feedboard.domain.coercion import coerce_views
from feedboard.domain.entities import Article, ArticleDraft
from feedboard.domain.exceptions import StoreNotReadyError
from feedboard.infrastructure.store_support import SEED_ARTICLES, next_created_at

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with a plain list.

    Writes are serialized with an ``asyncio.Lock``; every read and write
    returns copies so callers cannot reach the stored entities.
    """

    def __init__(self):
        self._articles: list[Article] = []
        self._ready = False
        self._last_created_at: datetime | None = None
        self._lock = asyncio.Lock()

    @property
    def backend_name(self) -> str:
        return "memory"

    async def initialize(self, seed: bool = True) -> None:
        async with self._lock:
            if self._ready:
                return
            if seed and not self._articles:
                for data in SEED_ARTICLES:
                    self._articles.append(self._build(ArticleDraft(
                        title=data["title"],
                        description=data["description"],
                        author=data["author"],
                        views=data["views"],
                    ), likes=data["likes"]))
                logger.debug("Seeded %d example articles", len(SEED_ARTICLES))
            self._ready = True
        logger.info("In-memory article store ready (%d articles)", len(self._articles))

    async def get_all(self) -> list[Article]:
        self._ensure_ready()
        return [replace(a) for a in self._articles]

    async def create(self, draft: ArticleDraft) -> Article:
        self._ensure_ready()
        async with self._lock:
            article = self._build(draft)
            self._articles.append(article)
        return replace(article)

    async def clear(self) -> None:
        async with self._lock:
            self._articles = []

    async def count(self) -> int:
        return len(self._articles)

    def _ensure_ready(self) -> None:
        if not self._ready:
            raise StoreNotReadyError(type(self).__name__)

    def _build(self, draft: ArticleDraft, likes: int = 0) -> Article:
        """Assign identity and timestamp. Caller must hold the lock."""
        self._last_created_at = next_created_at(self._last_created_at)
        return Article(
            id=str(uuid.uuid4()),
            title=draft.title,
            description=draft.description or "",
            author=draft.author or "",
            views=coerce_views(draft.views),
            likes=max(0, likes),
            created_at=self._last_created_at,
        )
