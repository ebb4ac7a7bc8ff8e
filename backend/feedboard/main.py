"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from feedboard.config import Settings, get_settings
from feedboard.application.interfaces import ArticleRepository
from feedboard.domain.exceptions import FeedboardError, InvalidInputError
from feedboard.infrastructure.dependencies import build_article_repository
from feedboard.infrastructure.logging.log_config import setup_logging
from feedboard.presentation.api.router import router as api_router
from feedboard.presentation.web.routes import router as web_router

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and initialize the article store."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    repository: ArticleRepository = app.state.article_repository
    await repository.initialize(seed=settings.seed_articles)
    logger.info(
        "Feed ready on port %d (store=%s)", settings.port, repository.backend_name
    )

    yield


def _register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto the ``{ok: false, error}`` envelope."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"ok": False, "error": exc.message},
        )

    @app.exception_handler(FeedboardError)
    async def feedboard_error_handler(request: Request, exc: FeedboardError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": INTERNAL_ERROR_MESSAGE},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"ok": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": INTERNAL_ERROR_MESSAGE},
        )


def create_app(
    settings: Settings | None = None,
    repository: ArticleRepository | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Pass *repository* to run the app on an explicitly constructed store;
    otherwise the backing named by ``ARTICLE_STORE`` is built.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.article_repository = repository or build_article_repository(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # API first, then static assets, then the SPA catch-all
    app.include_router(api_router)
    app.mount("/static", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")
    app.include_router(web_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "feedboard.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
