"""Feed synchronization: keeps a ``FeedView`` in step with the API."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from feedboard.domain.coercion import MIN_TITLE_LENGTH
from feedboard.presentation.web.client import FeedApiClient, FeedClientError
from feedboard.presentation.web.view import LOAD_ERROR_MESSAGE, FeedView

logger = logging.getLogger(__name__)

TITLE_TOO_SHORT_MESSAGE = f"The title needs at least {MIN_TITLE_LENGTH} characters."
SUBMIT_ERROR_MESSAGE = "Could not publish the article."


class SubmitResult(str, Enum):
    CREATED = "created"
    REJECTED = "rejected"      # failed the local title check, nothing sent
    FAILED = "failed"          # the request was sent and did not succeed
    BUSY = "busy"              # another submission is still in flight


class FeedController:
    """Drives the feed view from user actions.

    Loading replaces the feed; a successful submit prepends the article
    returned by the server. Nothing is retried automatically.
    """

    def __init__(self, client: FeedApiClient, view: FeedView | None = None):
        self._client = client
        self.view = view or FeedView()
        self.submitting = False
        self.form_error: str | None = None

    async def load(self) -> bool:
        try:
            articles = await self._client.list_articles()
        except FeedClientError as exc:
            logger.warning("Feed load failed: %s", exc.message)
            self.view.show_error(LOAD_ERROR_MESSAGE)
            return False
        self.view.replace(articles)
        return True

    async def submit(self, form: Mapping[str, Any]) -> SubmitResult:
        if self.submitting:
            return SubmitResult.BUSY

        title = form.get("title")
        if not isinstance(title, str) or len(title.strip()) < MIN_TITLE_LENGTH:
            self.form_error = TITLE_TOO_SHORT_MESSAGE
            return SubmitResult.REJECTED

        payload = {key: form[key] for key in ("title", "description", "author", "views") if key in form}
        self.submitting = True
        try:
            article = await self._client.create_article(payload)
        except FeedClientError as exc:
            logger.warning("Article submit failed: %s", exc.message)
            self.form_error = SUBMIT_ERROR_MESSAGE
            return SubmitResult.FAILED
        finally:
            self.submitting = False

        self.form_error = None
        self.view.prepend(article)
        return SubmitResult.CREATED

    def search(self, query: str) -> list[str]:
        return self.view.search(query)

    def toggle_like(self, article_id: str) -> int:
        return self.view.toggle_like(article_id)
