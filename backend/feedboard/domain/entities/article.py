"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ArticleDraft:
    """Partial record handed to the store: everything the caller may supply."""

    title: str
    description: str = ""
    author: str = ""
    views: int = 0


@dataclass
class Article:
    """Core domain entity representing a single feed entry.

    ``id``, ``likes`` and ``created_at`` are assigned by the store and never
    change afterwards.
    """

    id: str
    title: str
    description: str = ""
    author: str = ""
    views: int = 0
    likes: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
