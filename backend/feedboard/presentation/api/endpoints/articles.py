"""Article list/create endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from feedboard.application.schemas import (
    ArticleCreate,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticleResponse,
    ErrorEnvelope,
)
from feedboard.application.services import ArticleService
from feedboard.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_body(request: Request) -> Any:
    """Parsed request body: a dict for HTML form posts, decoded JSON otherwise.

    Returns None when a non-form body is empty or not JSON.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in _FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)
    try:
        return await request.json()
    except ValueError:
        return None


@router.get(
    "",
    response_model=ArticleListEnvelope,
    responses={500: {"model": ErrorEnvelope}},
)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListEnvelope:
    """Retrieve every article, newest first."""
    articles = await service.list_articles()
    return ArticleListEnvelope(
        data=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
    )


@router.post(
    "",
    response_model=ArticleEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def create_article(
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Create a new article from an untyped JSON or form-encoded body."""
    command = ArticleCreate.from_payload(await _read_body(request))
    article = await service.create_article(command)
    return ArticleEnvelope(data=ArticleResponse.model_validate(article, from_attributes=True))
