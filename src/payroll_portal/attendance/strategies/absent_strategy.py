from __future__ import annotations

from typing import Optional

from ...core.exceptions import ProfileMissingError
from ...core import messages
from ...payroll.calculator.base import PayrollCalculator
from ...profiles.model import SalaryProfile
from ..model import AttendanceEvent
from .base import AttendanceStrategy, DailyEntry

DEFAULT_REASON = "No reason provided"


class AbsentStrategy(AttendanceStrategy):
    """Absence deducts one day of basic salary."""

    requires_profile = True

    def evaluate(
        self,
        event: AttendanceEvent,
        *,
        profile: Optional[SalaryProfile],
        calculator: PayrollCalculator,
    ) -> DailyEntry:
        if profile is None:
            raise ProfileMissingError(messages.PROFILE_NOT_FOUND)
        return DailyEntry(
            work_hours=0.0,
            ot_hours=0.0,
            earned=0.0,
            deduction=calculator.absent_deduction(profile),
            details=event.note or DEFAULT_REASON,
        )
