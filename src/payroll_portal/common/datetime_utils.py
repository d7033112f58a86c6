from __future__ import annotations

import re
from datetime import date, datetime

from ..core.constants import APP_TZ, ATTENDANCE_PREFIX
from ..core.exceptions import InvalidDateError, ValidationError
from ..core import messages

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")
_PARTITION_RE = re.compile(r"^" + ATTENDANCE_PREFIX + r"(\d{4})_(\d{2})$")


def now_local() -> datetime:
    """Current time in the business timezone."""
    return datetime.now(APP_TZ)


def normalize_date(value: object) -> str:
    """Canonicalize a date-ish value to a ``YYYY-MM-DD`` string.

    Aware datetimes are converted to the business timezone first; naive ones
    are taken as wall-clock time there. Strings lose any time-of-day suffix
    (``T...`` or a space-separated part). Anything else raises
    :class:`InvalidDateError`.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(APP_TZ)
        return value.strftime("%Y-%m-%d")

    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")

    if not isinstance(value, str):
        raise InvalidDateError(messages.INVALID_DATE)

    text = value.strip()
    if "T" in text:
        text = text.split("T")[0]
    if " " in text:
        text = text.split(" ")[0]

    if not _DATE_RE.match(text):
        raise InvalidDateError(messages.INVALID_DATE)

    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        raise InvalidDateError(messages.INVALID_DATE)
    return text


def try_normalize_date(value: object) -> str | None:
    """Lenient variant used while scanning stored rows."""
    try:
        return normalize_date(value)
    except InvalidDateError:
        return None


def month_of(normalized_date: str) -> str:
    return normalized_date[:7]


def current_month(*, now: datetime | None = None) -> str:
    now = now or now_local()
    if now.tzinfo is not None:
        now = now.astimezone(APP_TZ)
    return now.strftime("%Y-%m")


def parse_month(value: str | None, *, now: datetime | None = None) -> str:
    """Validate a ``YYYY-MM`` month; blank means the current month."""

    if value is None or not str(value).strip():
        return current_month(now=now)

    text = str(value).strip()
    if not _MONTH_RE.match(text) or not 1 <= int(text[5:7]) <= 12:
        raise ValidationError(messages.INVALID_MONTH)
    return text


def partition_for_month(month: str) -> str:
    year, mm = month.split("-")
    return f"{ATTENDANCE_PREFIX}{year}_{mm}"


def month_for_partition(name: str) -> str | None:
    m = _PARTITION_RE.match(name)
    if not m:
        return None
    return f"{m.group(1)}-{m.group(2)}"


def iso_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def parse_timestamp(value: object) -> datetime | None:
    """Read a stored timestamp cell back into an aware datetime."""

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=APP_TZ)
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).strip())
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=APP_TZ)
