"""Single-page app fallback: every path outside /api and /static gets the shell."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from feedboard.application.schemas import ArticleResponse
from feedboard.application.services import ArticleService
from feedboard.config import Settings
from feedboard.domain.exceptions import FeedboardError
from feedboard.infrastructure.dependencies import get_app_settings, get_article_service
from feedboard.presentation.web.renderer import render_shell
from feedboard.presentation.web.view import FeedView

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)


@router.get("/{full_path:path}", response_class=HTMLResponse)
async def app_shell(
    full_path: str,
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """Serve the shell with the current feed pre-rendered."""
    view = FeedView()
    try:
        articles = await service.list_articles()
    except FeedboardError:
        logger.exception("Could not pre-render the feed for /%s", full_path)
        view.show_error()
    else:
        view.replace(ArticleResponse.model_validate(a, from_attributes=True) for a in articles)
    return HTMLResponse(render_shell(view, title=settings.app_title))
