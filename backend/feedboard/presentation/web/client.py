"""HTTP client for the feed API.

Unwraps the ``{ok, data|error}`` envelope; every failure, whatever its cause,
comes out as ``FeedClientError``.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from feedboard.application.schemas import ArticleResponse

logger = logging.getLogger(__name__)


class FeedClientError(Exception):
    """Raised for network errors, unreadable bodies and ``ok: false`` envelopes."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FeedApiClient:
    """Talks to ``/api/articles`` using httpx."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def list_articles(self) -> list[ArticleResponse]:
        data = await self._request("GET", "/api/articles")
        if not isinstance(data, list):
            raise FeedClientError("unexpected response")
        try:
            return [ArticleResponse.model_validate(item) for item in data]
        except ValidationError as exc:
            raise FeedClientError("unexpected response") from exc

    async def create_article(self, payload: dict[str, Any]) -> ArticleResponse:
        data = await self._request("POST", "/api/articles", json=payload)
        try:
            return ArticleResponse.model_validate(data)
        except ValidationError as exc:
            raise FeedClientError("unexpected response") from exc

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise FeedClientError("network error") from exc
        finally:
            if should_close:
                await client.aclose()

        try:
            body = response.json()
        except ValueError as exc:
            raise FeedClientError("invalid response", response.status_code) from exc

        if not isinstance(body, dict) or body.get("ok") is not True:
            message = body.get("error") if isinstance(body, dict) else None
            raise FeedClientError(
                message or f"request failed ({response.status_code})",
                response.status_code,
            )
        return body.get("data")
