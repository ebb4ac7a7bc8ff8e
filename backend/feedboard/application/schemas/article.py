"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from feedboard.domain.coercion import coerce_views, normalize_text, normalize_title
from feedboard.domain.exceptions import InvalidInputError


class ArticleCreate(BaseModel):
    """Validated create command built from an untyped request body.

    Only the title can be rejected; every other field is coerced.
    """

    title: str = Field(..., examples=["Atardecer en la ciudad"])
    description: str = ""
    author: str = ""
    views: int = 0

    model_config = {"extra": "ignore"}

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return normalize_title(value)

    @field_validator("description", "author", mode="before")
    @classmethod
    def _trim_text(cls, value: Any) -> str:
        return normalize_text(value)

    @field_validator("views", mode="before")
    @classmethod
    def _clamp_views(cls, value: Any) -> int:
        return coerce_views(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "ArticleCreate":
        """Build the command or raise ``InvalidInputError``.

        A body that is not a JSON object has no title and is rejected the same way.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInputError("invalid title", field="title") from exc


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    description: str
    author: str
    views: int
    likes: int
    created_at: datetime = Field(alias="createdAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class ArticleEnvelope(BaseModel):
    """``{ok, data}`` wrapper for a single article."""

    ok: bool = True
    data: ArticleResponse


class ArticleListEnvelope(BaseModel):
    """``{ok, data}`` wrapper for the feed listing."""

    ok: bool = True
    data: list[ArticleResponse]


class ErrorEnvelope(BaseModel):
    """``{ok: false, error}`` wrapper used by every failing response."""

    ok: bool = False
    error: str
