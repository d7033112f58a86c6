from __future__ import annotations

from datetime import datetime

import pytest

from payroll_portal.container import build_container
from payroll_portal.core.constants import APP_TZ
from payroll_portal.storage.memory_row_store import MemoryRowStore

# gross = 9000 + 4500 + 750 + 450 + 300 = 15000, so one day is worth 500
PROFILE_FIELDS = {
    "name": "Rahim Uddin",
    "company": "Acme Garments",
    "cardNo": "C-101",
    "section": "Sewing",
    "designation": "Operator",
    "grade": "5",
    "basicSalary": "9000",
    "houseRent": "4500",
    "medical": "750",
    "transport": "450",
    "food": "300",
    "otRate": "100",
    "presentBonus": "500",
    "nightAllowance": "80",
    "tiffinBill": "50",
}


@pytest.fixture
def profile_fields():
    return dict(PROFILE_FIELDS)


@pytest.fixture
def fixed_now():
    return datetime(2025, 11, 23, 10, 30, 0, tzinfo=APP_TZ)


@pytest.fixture
def store():
    return MemoryRowStore()


@pytest.fixture
def container(store):
    return build_container(store=store, rate_limit_per_minute=0)


@pytest.fixture
def seed_profile(container, fixed_now):
    def _seed(user_id: str = "emp001", **overrides):
        fields = dict(PROFILE_FIELDS)
        fields.update(overrides)
        return container.profile_service.save_profile(user_id, fields, now=fixed_now)

    return _seed
