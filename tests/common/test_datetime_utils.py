from datetime import date, datetime, timedelta, timezone

import pytest

from payroll_portal.common.datetime_utils import (
    current_month,
    month_for_partition,
    normalize_date,
    parse_month,
    parse_timestamp,
    partition_for_month,
    try_normalize_date,
)
from payroll_portal.core.constants import APP_TZ
from payroll_portal.core.exceptions import InvalidDateError, ValidationError


@pytest.mark.parametrize(
    "value",
    [
        "2025-11-23",
        "2025-11-23T10:30:00",
        "2025-11-23 10:30:00",
        " 2025-11-23 ",
        date(2025, 11, 23),
        datetime(2025, 11, 23, 10, 30),
    ],
)
def test_normalize_date_accepts_common_representations(value):
    assert normalize_date(value) == "2025-11-23"


def test_normalize_date_converts_aware_datetime_to_business_timezone():
    # 20:00 UTC is already the next day in Dhaka
    value = datetime(2025, 11, 22, 20, 0, tzinfo=timezone.utc)
    assert normalize_date(value) == "2025-11-23"


@pytest.mark.parametrize("value", ["23/11/2025", "2025-13-01", "2025-02-30", "", None, 20251123])
def test_normalize_date_rejects_garbage(value):
    with pytest.raises(InvalidDateError):
        normalize_date(value)


def test_try_normalize_date_returns_none_instead_of_raising():
    assert try_normalize_date("not a date") is None
    assert try_normalize_date("2025-11-01T00:00:00.000Z") == "2025-11-01"


def test_parse_month_defaults_to_current_month():
    now = datetime(2025, 11, 30, 23, 0, tzinfo=APP_TZ)
    assert parse_month(None, now=now) == "2025-11"
    assert parse_month("  ", now=now) == "2025-11"
    assert parse_month("2025-01", now=now) == "2025-01"


@pytest.mark.parametrize("value", ["2025-13", "2025-00", "2025/11", "Nov 2025"])
def test_parse_month_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        parse_month(value)


def test_current_month_uses_business_timezone():
    now = datetime(2025, 11, 30, 19, 0, tzinfo=timezone.utc)
    assert current_month(now=now) == "2025-12"


def test_partition_names_round_trip():
    assert partition_for_month("2025-11") == "Attendance_2025_11"
    assert month_for_partition("Attendance_2025_11") == "2025-11"
    assert month_for_partition("Profiles") is None


def test_parse_timestamp_assumes_business_timezone_for_naive_values():
    parsed = parse_timestamp("2025-11-23T10:30:00")
    assert parsed.utcoffset() == timedelta(hours=6)
    assert parse_timestamp("") is None
    assert parse_timestamp("garbage") is None
