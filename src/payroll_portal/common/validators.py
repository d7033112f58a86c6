from __future__ import annotations

import re
from typing import Any, Optional

from ..core.constants import MAX_TEXT_LENGTH, USER_ID_PATTERN
from ..core.exceptions import ValidationError
from ..core import messages

_USER_ID_RE = re.compile(USER_ID_PATTERN)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Optional[str], field_name: str = "") -> str:
    if value is None or not str(value).strip():
        raise ValidationError(messages.ALL_FIELDS_REQUIRED)
    return str(value).strip()


def require_min_length(value: Optional[str], min_len: int, message: str) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(message)
    return value


def sanitize_text(value: Any, *, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Trim free text; blank input becomes an empty string."""

    if value is None:
        return ""
    text = str(value).strip()
    if len(text) > max_length:
        raise ValidationError(messages.INPUT_TOO_LONG)
    return text


def validate_user_id(value: Any) -> str:
    text = require_non_empty(value)
    if not _USER_ID_RE.match(text):
        raise ValidationError(messages.INVALID_ID)
    return text


def coerce_non_negative(value: Any, *, default: float = 0.0) -> float:
    """Coerce a form value to a non-negative float.

    Blank or missing input yields ``default``; anything unparseable or
    negative is rejected.
    """

    if is_blank(value):
        return float(default)
    if isinstance(value, bool):
        raise ValidationError(messages.INVALID_NUMBER)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(messages.INVALID_NUMBER)
    if number != number or number < 0 or number == float("inf"):
        raise ValidationError(messages.INVALID_NUMBER)
    return number


def read_number(value: Any, *, default: float = 0.0) -> float:
    """Lenient numeric read for stored cells (never raises)."""

    if is_blank(value):
        return float(default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    if number != number:
        return float(default)
    return number


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1", "yes", "on"}
