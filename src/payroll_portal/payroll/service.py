from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_month
from ..core.enums import AttendanceStatus
from ..profiles.repository import ProfileRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator


@dataclass(frozen=True)
class MonthlyStats:
    month: str
    present_days: int
    absent_days: int
    total_ot_hours: float
    total_ot_amount: float
    total_deduction: float
    present_bonus: float

    def to_dict(self) -> dict:
        return {
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalOTHours": self.total_ot_hours,
            "totalOTAmount": self.total_ot_amount,
            "totalDeduction": self.total_deduction,
            "presentBonus": self.present_bonus,
        }


@dataclass(frozen=True)
class SalarySummary:
    """Read-model for the monthly salary card."""

    stats: MonthlyStats
    gross_salary: float
    total_earned: float
    net_after_deduction: float
    total_salary: float

    def to_dict(self) -> dict:
        return {
            "month": self.stats.month,
            "grossSalary": self.gross_salary,
            "totalEarned": self.total_earned,
            "totalDeduction": self.stats.total_deduction,
            "netAfterDeduction": self.net_after_deduction,
            "presentBonus": self.stats.present_bonus,
            "totalSalary": self.total_salary,
            "stats": self.stats.to_dict(),
        }


class MonthlyStatsService:
    """Reduces one user's month of ledger rows into payroll figures.

    OT amounts are recomputed from the profile's current rate, while
    deductions come from the stored rows.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        profiles: ProfileRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._profiles = profiles
        self._calculator = calculator or StandardPayrollCalculator()

    def stats(self, user_id: str, *, month: Optional[str] = None, now: datetime | None = None) -> MonthlyStats:
        month = parse_month(month, now=now)
        records = self._attendance.list_for_user(user_id, month)
        profile = self._profiles.get_by_user(user_id)

        present_days = 0
        absent_days = 0
        total_ot_hours = 0.0
        total_ot_amount = 0.0
        total_deduction = 0.0

        for r in records:
            if r.status == AttendanceStatus.PRESENT:
                present_days += 1
                total_ot_hours += r.ot_hours
                if profile:
                    total_ot_amount += self._calculator.ot_amount(profile, r.ot_hours)
            elif r.status == AttendanceStatus.ABSENT:
                absent_days += 1
                total_deduction += r.deduction

        present_bonus = self._calculator.monthly_bonus(profile, absent_days=absent_days) if profile else 0.0

        return MonthlyStats(
            month=month,
            present_days=present_days,
            absent_days=absent_days,
            total_ot_hours=total_ot_hours,
            total_ot_amount=total_ot_amount,
            total_deduction=total_deduction,
            present_bonus=present_bonus,
        )

    def salary_summary(self, user_id: str, *, month: Optional[str] = None, now: datetime | None = None) -> SalarySummary:
        stats = self.stats(user_id, month=month, now=now)
        records = self._attendance.list_for_user(user_id, stats.month)
        profile = self._profiles.get_by_user(user_id)

        gross = profile.gross_salary if profile else 0.0
        net = gross - stats.total_deduction
        return SalarySummary(
            stats=stats,
            gross_salary=gross,
            total_earned=sum(r.earned for r in records),
            net_after_deduction=net,
            total_salary=net + stats.present_bonus,
        )
