from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_FOOD, DEFAULT_MEDICAL, DEFAULT_TRANSPORT


@dataclass(frozen=True)
class SalaryProfile:
    """Domain entity: one user's salary configuration (at most one per user)."""

    user_id: str
    name: str = ""
    company: str = ""
    card_no: str = ""
    section: str = ""
    designation: str = ""
    grade: str = ""
    basic_salary: float = 0.0
    house_rent: float = 0.0
    medical: float = DEFAULT_MEDICAL
    transport: float = DEFAULT_TRANSPORT
    food: float = DEFAULT_FOOD
    ot_rate: float = 0.0
    present_bonus: float = 0.0
    night_allowance: float = 0.0
    tiffin_bill: float = 0.0
    profile_image: str = ""
    updated_at: Optional[datetime] = None

    @property
    def fixed_allowances(self) -> float:
        return self.medical + self.transport + self.food

    @property
    def gross_salary(self) -> float:
        return self.basic_salary + self.house_rent + self.fixed_allowances

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "company": self.company,
            "cardNo": self.card_no,
            "section": self.section,
            "designation": self.designation,
            "grade": self.grade,
            "basicSalary": self.basic_salary,
            "houseRent": self.house_rent,
            "medical": self.medical,
            "transport": self.transport,
            "food": self.food,
            # Older clients read the three allowances as one figure.
            "medicalTransport": self.fixed_allowances,
            "otRate": self.ot_rate,
            "presentBonus": self.present_bonus,
            "nightAllowance": self.night_allowance,
            "tiffinBill": self.tiffin_bill,
            "profileImage": self.profile_image,
            "profileComplete": True,
        }


@dataclass(frozen=True)
class IncompleteProfile:
    """Returned for users who have not completed profile setup yet."""

    user_id: str

    def to_dict(self) -> dict:
        return {"id": self.user_id, "profileComplete": False}
