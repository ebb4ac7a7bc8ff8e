"""Client-side feed view-state.

Everything here is pure: no HTTP, no HTML. ``FeedView`` holds the rendered
cards and their visibility; ``filter_visible`` is the search rule on its own.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from feedboard.application.schemas import ArticleResponse

LOAD_ERROR_MESSAGE = "Could not load the feed."


class Searchable(Protocol):
    id: str
    title: str
    description: str


class LikeState(str, Enum):
    UNPRESSED = "unpressed"
    PRESSED = "pressed"


def matches_query(article: Searchable, query: str) -> bool:
    """Case-insensitive substring match against title and description."""
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in (article.title or "").lower() or needle in (article.description or "").lower()


def filter_visible(articles: Iterable[Searchable], query: str) -> list[str]:
    """Ids of the articles that stay visible for *query*, in feed order."""
    return [a.id for a in articles if matches_query(a, query)]


@dataclass
class Card:
    """One rendered article plus its page-local state."""

    article: ArticleResponse
    likes: int
    like_state: LikeState = LikeState.UNPRESSED
    hidden: bool = False

    @classmethod
    def from_article(cls, article: ArticleResponse) -> "Card":
        return cls(article=article, likes=max(0, article.likes))

    @property
    def id(self) -> str:
        return self.article.id

    @property
    def title(self) -> str:
        return self.article.title

    @property
    def description(self) -> str:
        return self.article.description

    @property
    def pressed(self) -> bool:
        return self.like_state is LikeState.PRESSED

    def toggle_like(self) -> int:
        """Flip the like button and return the new count (never below zero)."""
        if self.like_state is LikeState.UNPRESSED:
            self.like_state = LikeState.PRESSED
            self.likes += 1
        else:
            self.like_state = LikeState.UNPRESSED
            self.likes = max(0, self.likes - 1)
        return self.likes


class FeedView:
    """Visible feed: ordered cards, current search query and load error."""

    def __init__(self):
        self._cards: list[Card] = []
        self.query = ""
        self.error: str | None = None

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def visible_cards(self) -> list[Card]:
        return [c for c in self._cards if not c.hidden]

    @property
    def visible_ids(self) -> list[str]:
        return [c.id for c in self.visible_cards]

    @property
    def no_results(self) -> bool:
        """True when no card is visible (and the feed did not fail to load)."""
        return self.error is None and not self.visible_cards

    def replace(self, articles: Iterable[ArticleResponse]) -> None:
        """Swap the whole feed for *articles*, keeping the active search."""
        self._cards = [Card.from_article(a) for a in articles]
        self.error = None
        self._apply_query()

    def show_error(self, message: str = LOAD_ERROR_MESSAGE) -> None:
        self._cards = []
        self.error = message

    def prepend(self, article: ArticleResponse) -> Card:
        """Put a server-confirmed article at the top of the feed."""
        card = Card.from_article(article)
        self._cards.insert(0, card)
        self.error = None
        card.hidden = not matches_query(card, self.query)
        return card

    def search(self, query: str) -> list[str]:
        """Apply *query* to the rendered cards and return the visible ids."""
        self.query = query
        self._apply_query()
        return self.visible_ids

    def toggle_like(self, article_id: str) -> int:
        return self.card(article_id).toggle_like()

    def card(self, article_id: str) -> Card:
        for card in self._cards:
            if card.id == article_id:
                return card
        raise KeyError(article_id)

    def _apply_query(self) -> None:
        visible = set(filter_visible(self._cards, self.query))
        for card in self._cards:
            card.hidden = card.id not in visible
