"""Health check endpoint."""

from fastapi import APIRouter, Depends

from feedboard.application.interfaces import ArticleRepository
from feedboard.application.schemas import HealthEnvelope, HealthStatus
from feedboard.config import Settings
from feedboard.infrastructure.dependencies import get_app_settings, get_article_repository

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthEnvelope)
async def health_check(
    repository: ArticleRepository = Depends(get_article_repository),
    settings: Settings = Depends(get_app_settings),
) -> HealthEnvelope:
    """Returns the current application health status."""
    return HealthEnvelope(
        data=HealthStatus(
            status="healthy",
            version=settings.app_version,
            environment=settings.app_env,
            store=repository.backend_name,
        )
    )
