"""Normalization rules for article input.

Each rule is a plain function so the API schema, the stores and the tests can
share them. They never raise for malformed input except ``normalize_title``.
"""

import math
from typing import Any

from feedboard.domain.exceptions import InvalidInputError

MIN_TITLE_LENGTH = 2
# Largest count a signed 64-bit column holds.
MAX_VIEWS = 2**63 - 1

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def normalize_title(value: Any) -> str:
    """Trim a title and reject it when missing, not a string, or too short."""
    if not isinstance(value, str):
        raise InvalidInputError("invalid title", field="title")
    title = value.strip()
    if len(title) < MIN_TITLE_LENGTH:
        raise InvalidInputError("invalid title", field="title")
    return title


def normalize_text(value: Any) -> str:
    """Coerce an optional free-text field to a trimmed string ('' when absent)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bool, int, float)):
        return str(value).strip()
    return ""


def normalize_author(value: Any, placeholder: str) -> str:
    """Trimmed author name, or *placeholder* when absent or blank."""
    author = normalize_text(value)
    return author or placeholder


def _parse_number(text: str) -> float | None:
    """Parse a numeric string the way JavaScript's ``Number()`` does.

    Radix prefixes (``0x``, ``0o``, ``0b``) are honoured without a sign;
    digit separators are not accepted.
    """
    if "_" in text:
        return None
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        digits = text[2:]
        if not digits.isalnum():
            return None
        try:
            return float(int(digits, radix))
        except (ValueError, OverflowError):
            return None
    try:
        return float(text)
    except ValueError:
        return None


def coerce_views(value: Any) -> int:
    """Turn any input into a non-negative integer view count.

    Numbers and numeric strings are parsed, fractions truncated and the result
    clamped to ``0..MAX_VIEWS``. Anything else (including NaN and infinities)
    counts as 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return min(max(0, value), MAX_VIEWS)
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        number = _parse_number(text)
        if number is None:
            return 0
    else:
        return 0

    if not math.isfinite(number):
        return 0
    return min(max(0, math.floor(number)), MAX_VIEWS)
