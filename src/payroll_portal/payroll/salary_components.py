from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import coerce_non_negative
from ..core.constants import (
    BASIC_DIVISOR,
    DEFAULT_FOOD,
    DEFAULT_MEDICAL,
    DEFAULT_TRANSPORT,
    FIXED_ALLOWANCES_TOTAL,
    HOUSE_RENT_RATIO,
    OT_RATE_DIVISOR,
)
from ..core.exceptions import ValidationError
from ..core import messages


@dataclass(frozen=True)
class SalaryComponents:
    basic_salary: float
    house_rent: float
    medical: float
    transport: float
    food: float
    total_salary: float
    ot_rate: float

    def to_dict(self) -> dict:
        return {
            "basicSalary": self.basic_salary,
            "houseRent": self.house_rent,
            "medical": self.medical,
            "transport": self.transport,
            "food": self.food,
            "totalSalary": self.total_salary,
            "otRate": self.ot_rate,
        }


def components_from_gross(gross_salary: Any) -> SalaryComponents:
    """Split a gross monthly salary into the profile's salary components.

    basic = (gross - fixed allowances) / 1.5, house rent = 50% of basic,
    OT rate = basic / 104. Amounts are rounded to 2 decimals.
    """

    gross = coerce_non_negative(gross_salary)
    if gross <= FIXED_ALLOWANCES_TOTAL:
        raise ValidationError(messages.GROSS_TOO_LOW)

    basic = (gross - FIXED_ALLOWANCES_TOTAL) / BASIC_DIVISOR
    house_rent = basic * HOUSE_RENT_RATIO
    total = basic + house_rent + FIXED_ALLOWANCES_TOTAL

    return SalaryComponents(
        basic_salary=round(basic, 2),
        house_rent=round(house_rent, 2),
        medical=DEFAULT_MEDICAL,
        transport=DEFAULT_TRANSPORT,
        food=DEFAULT_FOOD,
        total_salary=round(total, 2),
        ot_rate=round(basic / OT_RATE_DIVISOR, 2),
    )
