"""Logging setup for the feed service.

``setup_logging`` is called from the lifespan. It sets the root level, makes
sure log records reach stderr when no server handler is installed, and applies
one level per logger category so store, SQL, outbound HTTP and uvicorn noise
can be tuned independently through settings.
"""

import logging
import sys

from feedboard.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Settings field → loggers whose level it controls
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_store": (
        "feedboard.infrastructure.memory",
        "feedboard.infrastructure.database",
    ),
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied = {}
    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level_name = getattr(settings, field_name)
        for name in logger_names:
            logging.getLogger(name).setLevel(level_from_name(level_name))
        applied[field_name.removeprefix("log_level_")] = level_name

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, applied)


def level_from_name(name: str) -> int:
    """``logging`` level for *name* (case-insensitive); unknown names mean INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
