from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import current_month, normalize_date, now_local, parse_month
from ..common.validators import coerce_non_negative, is_blank, parse_flag, sanitize_text
from ..core.constants import DEFAULT_WORK_HOURS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NoRecordsForMonthError, RecordNotFoundError, ValidationError
from ..core import messages
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..profiles.service import ProfileService
from .factory import AttendanceStrategyFactory
from .model import AttendanceEvent, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _require_date(value: Any) -> str:
    if is_blank(value):
        raise ValidationError(messages.DATE_REQUIRED)
    return normalize_date(value)


class AttendanceService:
    """Use cases: record, correct and delete attendance days."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        profiles: ProfileService,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: PayrollCalculator | None = None,
    ):
        self._attendance = attendance
        self._profiles = profiles
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or StandardPayrollCalculator()

    def record(self, event: AttendanceEvent, *, now: datetime | None = None) -> AttendanceRecord:
        """Compute the day's amounts and upsert it by (user, date)."""

        strategy = self._factory.for_status(event.status)
        profile = self._profiles.require_profile(event.user_id) if strategy.requires_profile else None
        entry = strategy.evaluate(event, profile=profile, calculator=self._calculator)

        record = AttendanceRecord(
            user_id=event.user_id,
            date=event.date,
            status=event.status,
            work_hours=entry.work_hours,
            ot_hours=entry.ot_hours,
            total_hours=entry.total_hours,
            earned=entry.earned,
            deduction=entry.deduction,
            details=entry.details,
            created_at=now or now_local(),
        )
        self._attendance.upsert(record)
        return record

    def record_present(
        self,
        user_id: str,
        *,
        date: Any,
        ot_hours: Any = None,
        is_friday: Any = False,
        work_hours: Any = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        event = AttendanceEvent(
            user_id=user_id,
            date=_require_date(date),
            status=AttendanceStatus.PRESENT,
            ot_hours=coerce_non_negative(ot_hours),
            work_hours=coerce_non_negative(work_hours, default=DEFAULT_WORK_HOURS),
            is_friday=parse_flag(is_friday),
        )
        return self.record(event, now=now)

    def record_absent(self, user_id: str, *, date: Any, reason: Optional[str] = None, now: datetime | None = None) -> AttendanceRecord:
        event = AttendanceEvent(
            user_id=user_id,
            date=_require_date(date),
            status=AttendanceStatus.ABSENT,
            note=sanitize_text(reason),
        )
        return self.record(event, now=now)

    def record_offday(self, user_id: str, *, date: Any, day_type: Optional[str] = None, now: datetime | None = None) -> AttendanceRecord:
        return self._record_unpaid(user_id, AttendanceStatus.OFFDAY, date=date, day_type=day_type, now=now)

    def record_leave(self, user_id: str, *, date: Any, day_type: Optional[str] = None, now: datetime | None = None) -> AttendanceRecord:
        return self._record_unpaid(user_id, AttendanceStatus.LEAVE, date=date, day_type=day_type, now=now)

    def _record_unpaid(self, user_id: str, status: AttendanceStatus, *, date: Any, day_type: Optional[str], now: datetime | None) -> AttendanceRecord:
        event = AttendanceEvent(
            user_id=user_id,
            date=_require_date(date),
            status=status,
            note=sanitize_text(day_type),
        )
        return self.record(event, now=now)

    def delete(self, user_id: str, *, date: Any) -> int:
        """Delete every row for (user, date); returns how many were removed."""

        work_date = _require_date(date)
        deleted = self._attendance.delete_for_user_and_date(user_id, work_date)
        if deleted is None:
            raise NoRecordsForMonthError(messages.NO_RECORDS_FOR_MONTH)
        if deleted == 0:
            raise RecordNotFoundError(messages.RECORD_NOT_FOUND)

        logger.info("Deleted %d record(s) for %s on %s", deleted, user_id, work_date)
        return deleted

    def history(self, user_id: str, *, month: Optional[str] = None, now: datetime | None = None) -> list[AttendanceRecord]:
        return list(self._attendance.list_for_user(user_id, parse_month(month, now=now)))

    def available_months(self, *, now: datetime | None = None) -> list[str]:
        months = list(self._attendance.list_months())
        this_month = current_month(now=now)
        if this_month not in months:
            months.insert(0, this_month)
        return sorted(months, reverse=True)
