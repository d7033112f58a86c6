from __future__ import annotations

import logging
from typing import Optional

from ...core.exceptions import ProfileMissingError
from ...core import messages
from ...payroll.calculator.base import PayrollCalculator
from ...profiles.model import SalaryProfile
from ..model import AttendanceEvent
from .base import AttendanceStrategy, DailyEntry

logger = logging.getLogger(__name__)

FRIDAY_DETAILS = "Friday Work"
REGULAR_DETAILS = "Regular Work"


class PresentStrategy(AttendanceStrategy):
    """Worked day: daily salary (not on Friday) + overtime + allowances.

    The monthly present bonus is never part of a day's figure.
    """

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
        day = calculator.present_day(profile, ot_hours=event.ot_hours, is_friday=event.is_friday)

        logger.debug(
            "Daily earnings for %s on %s: daily=%.2f ot=%.2f tiffin=%.2f night=%.2f total=%.2f",
            event.user_id,
            event.date,
            day.daily_salary,
            day.ot_amount,
            day.tiffin,
            day.night,
            day.total,
        )

        return DailyEntry(
            work_hours=event.work_hours,
            ot_hours=event.ot_hours,
            earned=day.total,
            deduction=0.0,
            details=FRIDAY_DETAILS if event.is_friday else REGULAR_DETAILS,
        )
