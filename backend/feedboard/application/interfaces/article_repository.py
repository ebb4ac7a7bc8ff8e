"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from feedboard.domain.entities import Article, ArticleDraft


class ArticleRepository(ABC):
    """Port for the article store — implemented in the infrastructure layer.

    Every backing must hand out copies, never references to its own records,
    and must raise ``StoreNotReadyError`` from ``get_all``/``create`` until
    ``initialize`` has completed.
    """

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Short identifier of the backing (e.g. 'memory', 'sql')."""
        ...

    @abstractmethod
    async def initialize(self, seed: bool = True) -> None:
        """Establish the backing collection. Idempotent.

        When *seed* is true and the collection is empty, example articles
        are inserted.
        """
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Return copies of all stored articles, in no particular order."""
        ...

    @abstractmethod
    async def create(self, draft: ArticleDraft) -> Article:
        """Store a new article and return a copy with id, likes and created_at assigned."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every stored article."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored articles."""
        ...
