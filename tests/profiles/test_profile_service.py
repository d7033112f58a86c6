import pytest

from payroll_portal.core.constants import PROFILES_PARTITION
from payroll_portal.core.exceptions import ProfileMissingError, ValidationError
from payroll_portal.profiles.model import IncompleteProfile


def test_new_user_gets_incomplete_marker(container):
    profile = container.profile_service.get_profile("emp001")

    assert isinstance(profile, IncompleteProfile)
    assert profile.to_dict() == {"id": "emp001", "profileComplete": False}


def test_require_profile_raises_for_new_user(container):
    with pytest.raises(ProfileMissingError):
        container.profile_service.require_profile("emp001")


def test_save_profile_then_read_back(container, seed_profile):
    seed_profile()
    data = container.profile_service.get_profile("emp001").to_dict()

    assert data["profileComplete"] is True
    assert data["basicSalary"] == 9000.0
    assert data["otRate"] == 100.0
    assert data["medicalTransport"] == 1500.0
    assert data["cardNo"] == "C-101"


def test_save_profile_is_an_upsert(container, store, seed_profile):
    seed_profile()
    seed_profile(basicSalary="12000")

    rows = store.scan_rows(store.get_partition(PROFILES_PARTITION))
    assert len(rows) == 1
    assert container.profile_service.require_profile("emp001").basic_salary == 12000.0


def test_blank_allowances_fall_back_to_defaults(container, fixed_now):
    profile = container.profile_service.save_profile(
        "emp002", {"basicSalary": "9000", "medical": "", "food": "0"}, now=fixed_now
    )

    assert profile.medical == 750.0
    assert profile.transport == 450.0
    assert profile.food == 0.0


def test_negative_money_is_rejected(container, seed_profile):
    with pytest.raises(ValidationError):
        seed_profile(otRate="-5")
