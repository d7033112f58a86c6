from __future__ import annotations

from ...core.constants import DAYS_PER_MONTH, NIGHT_OT_HOURS, TIFFIN_OT_HOURS
from ...profiles.model import SalaryProfile
from .base import DayEarnings, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rules.

    - daily salary = gross / 30
    - Friday pays overtime only, other days pay daily salary + overtime
    - tiffin bill from 5 OT hours, night allowance from 7 (both inclusive, additive)
    - absence deducts basic / 30
    - present bonus is monthly and forfeited entirely by any absence
    """

    def daily_salary(self, profile: SalaryProfile) -> float:
        return profile.gross_salary / DAYS_PER_MONTH

    def ot_amount(self, profile: SalaryProfile, ot_hours: float) -> float:
        return ot_hours * profile.ot_rate

    def present_day(self, profile: SalaryProfile, *, ot_hours: float, is_friday: bool) -> DayEarnings:
        daily = self.daily_salary(profile)
        ot_amount = self.ot_amount(profile, ot_hours)

        earned = ot_amount if is_friday else daily + ot_amount

        tiffin = profile.tiffin_bill if ot_hours >= TIFFIN_OT_HOURS else 0.0
        night = profile.night_allowance if ot_hours >= NIGHT_OT_HOURS else 0.0
        earned += tiffin
        earned += night

        return DayEarnings(
            daily_salary=0.0 if is_friday else daily,
            ot_amount=ot_amount,
            tiffin=tiffin,
            night=night,
            total=earned,
        )

    def absent_deduction(self, profile: SalaryProfile) -> float:
        return profile.basic_salary / DAYS_PER_MONTH

    def monthly_bonus(self, profile: SalaryProfile, *, absent_days: int) -> float:
        return profile.present_bonus if absent_days == 0 else 0.0
