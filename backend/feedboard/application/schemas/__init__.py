from .article import (
    ArticleCreate,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticleResponse,
    ErrorEnvelope,
)
from .health import HealthEnvelope, HealthStatus

__all__ = [
    "ArticleCreate",
    "ArticleEnvelope",
    "ArticleListEnvelope",
    "ArticleResponse",
    "ErrorEnvelope",
    "HealthEnvelope",
    "HealthStatus",
]
