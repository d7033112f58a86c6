from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Union

from ..common.datetime_utils import now_local
from ..common.validators import coerce_non_negative, sanitize_text
from ..core.constants import DEFAULT_FOOD, DEFAULT_MEDICAL, DEFAULT_TRANSPORT, MAX_NAME_LENGTH
from ..core.exceptions import ProfileMissingError
from ..core import messages
from .model import IncompleteProfile, SalaryProfile
from .repository import ProfileRepository

# (form field, attribute, default)
MONEY_FIELDS = (
    ("basicSalary", "basic_salary", 0.0),
    ("houseRent", "house_rent", 0.0),
    ("medical", "medical", DEFAULT_MEDICAL),
    ("transport", "transport", DEFAULT_TRANSPORT),
    ("food", "food", DEFAULT_FOOD),
    ("otRate", "ot_rate", 0.0),
    ("presentBonus", "present_bonus", 0.0),
    ("nightAllowance", "night_allowance", 0.0),
    ("tiffinBill", "tiffin_bill", 0.0),
)

TEXT_FIELDS = (
    ("company", "company"),
    ("cardNo", "card_no"),
    ("section", "section"),
    ("designation", "designation"),
    ("grade", "grade"),
)


class ProfileService:
    """Use cases: read and save a user's salary profile."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get_profile(self, user_id: str) -> Union[SalaryProfile, IncompleteProfile]:
        profile = self._profiles.get_by_user(user_id)
        return profile if profile else IncompleteProfile(user_id=user_id)

    def require_profile(self, user_id: str) -> SalaryProfile:
        profile = self._profiles.get_by_user(user_id)
        if not profile:
            raise ProfileMissingError(messages.PROFILE_NOT_FOUND)
        return profile

    def save_profile(self, user_id: str, fields: Mapping[str, Any], *, now: datetime | None = None) -> SalaryProfile:
        """Validate every field and overwrite the user's profile row."""

        values: dict[str, Any] = {
            "name": sanitize_text(fields.get("name"), max_length=MAX_NAME_LENGTH),
            "profile_image": str(fields.get("profileImage") or "").strip(),
        }
        for form_name, attr in TEXT_FIELDS:
            values[attr] = sanitize_text(fields.get(form_name))
        for form_name, attr, default in MONEY_FIELDS:
            values[attr] = coerce_non_negative(fields.get(form_name), default=default)

        profile = SalaryProfile(user_id=user_id, updated_at=now or now_local(), **values)
        self._profiles.upsert(profile)
        return profile
