from __future__ import annotations

from typing import Optional

from ...payroll.calculator.base import PayrollCalculator
from ...profiles.model import SalaryProfile
from ..model import AttendanceEvent
from .base import AttendanceStrategy, DailyEntry


class UnpaidDayStrategy(AttendanceStrategy):
    """Off-days and leave: nothing earned, nothing deducted."""

    def evaluate(
        self,
        event: AttendanceEvent,
        *,
        profile: Optional[SalaryProfile],
        calculator: PayrollCalculator,
    ) -> DailyEntry:
        return DailyEntry(
            work_hours=0.0,
            ot_hours=0.0,
            earned=0.0,
            deduction=0.0,
            details=event.note or event.status.value,
        )
