"""Unit tests for per-category log levels."""

import logging

import pytest

from feedboard.config import Settings
from feedboard.infrastructure.logging.log_config import level_from_name, setup_logging


@pytest.fixture(autouse=True)
def restore_logger_levels():
    names = ["", "httpx", "httpcore", "sqlalchemy.engine", "feedboard.infrastructure.memory"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_http_client_loggers_follow_their_own_level():
    setup_logging(Settings(_env_file=None, log_level_http="ERROR"))
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR


def test_store_and_sql_categories_are_independent():
    setup_logging(Settings(_env_file=None, log_level_store="DEBUG", log_level_sql="CRITICAL"))
    assert logging.getLogger("feedboard.infrastructure.memory").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.CRITICAL


def test_root_level_from_settings():
    setup_logging(Settings(_env_file=None, log_level="warning"))
    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" Error ", logging.ERROR), ("loud", logging.INFO)],
)
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected
