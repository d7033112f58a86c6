from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_WORK_HOURS
from ..core.enums import AttendanceStatus, UpsertAction


@dataclass(frozen=True)
class AttendanceEvent:
    """One submitted attendance day, before any amounts are computed.

    ``date`` is already normalized to ``YYYY-MM-DD``.
    """

    user_id: str
    date: str
    status: AttendanceStatus
    ot_hours: float = 0.0
    work_hours: float = DEFAULT_WORK_HOURS
    is_friday: bool = False
    note: str = ""


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one ledger row, unique per (user_id, date)."""

    user_id: str
    date: str
    status: AttendanceStatus
    work_hours: float
    ot_hours: float
    total_hours: float
    earned: float
    deduction: float
    details: str
    created_at: Optional[datetime] = None

    @property
    def month(self) -> str:
        return self.date[:7]

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "status": self.status.value,
            "workHours": self.work_hours,
            "otHours": self.ot_hours,
            "totalHours": self.total_hours,
            "earned": self.earned,
            "deduction": self.deduction,
            "details": self.details,
        }


@dataclass(frozen=True)
class UpsertResult:
    action: UpsertAction
    partition: str
    row_index: int
