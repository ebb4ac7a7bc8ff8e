"""Concrete repository implementation backed by SQLAlchemy."""

import asyncio
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from feedboard.application.interfaces import ArticleRepository
from feedboard.domain.coercion import coerce_views
from feedboard.domain.entities import Article, ArticleDraft
from feedboard.domain.exceptions import StoreNotReadyError
from feedboard.infrastructure.database.base import Base
from feedboard.infrastructure.database.models import ArticleModel
from feedboard.infrastructure.database.session import create_session_factory
from feedboard.infrastructure.store_support import SEED_ARTICLES, next_created_at

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on an async SQLAlchemy engine.

    Each operation runs in its own session; writes are serialized per
    instance so timestamps stay strictly increasing.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._engine = engine
        self._session_factory = session_factory or create_session_factory(engine)
        self._ready = False
        self._lock = asyncio.Lock()

    @property
    def backend_name(self) -> str:
        return "sql"

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        created_at = model.created_at
        # SQLite drops tzinfo on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Article(
            id=model.id,
            title=model.title,
            description=model.description,
            author=model.author,
            views=model.views,
            likes=model.likes,
            created_at=created_at,
        )

    async def initialize(self, seed: bool = True) -> None:
        async with self._lock:
            if self._ready:
                return
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            if seed and await self._count() == 0:
                for data in SEED_ARTICLES:
                    await self._insert(
                        ArticleDraft(
                            title=data["title"],
                            description=data["description"],
                            author=data["author"],
                            views=data["views"],
                        ),
                        likes=data["likes"],
                    )
                logger.debug("Seeded %d example articles", len(SEED_ARTICLES))
            self._ready = True
        logger.info("SQL article store ready (%s)", self._engine.url.render_as_string(hide_password=True))

    async def get_all(self) -> list[Article]:
        self._ensure_ready()
        async with self._session_factory() as session:
            stmt = select(ArticleModel).order_by(ArticleModel.created_at)
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, draft: ArticleDraft) -> Article:
        self._ensure_ready()
        async with self._lock:
            return await self._insert(draft)

    async def clear(self) -> None:
        async with self._lock:
            async with self._session_factory() as session:
                await session.execute(delete(ArticleModel))
                await session.commit()

    async def count(self) -> int:
        return await self._count()

    def _ensure_ready(self) -> None:
        if not self._ready:
            raise StoreNotReadyError(type(self).__name__)

    async def _count(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count()).select_from(ArticleModel))
            return result.scalar_one()

    async def _insert(self, draft: ArticleDraft, likes: int = 0) -> Article:
        """Persist *draft*. Caller must hold the lock."""
        async with self._session_factory() as session:
            latest = await session.execute(select(func.max(ArticleModel.created_at)))
            previous: datetime | None = latest.scalar_one_or_none()
            if previous is not None and previous.tzinfo is None:
                previous = previous.replace(tzinfo=timezone.utc)

            model = ArticleModel(
                id=str(uuid.uuid4()),
                title=draft.title,
                description=draft.description or "",
                author=draft.author or "",
                views=coerce_views(draft.views),
                likes=max(0, likes),
                created_at=next_created_at(previous),
            )
            session.add(model)
            await session.commit()
            return self._to_entity(model)
