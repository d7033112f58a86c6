from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.unpaid_strategy import UnpaidDayStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the earning strategy for a status."""

    def for_status(self, status: AttendanceStatus) -> AttendanceStrategy:
        if status == AttendanceStatus.PRESENT:
            return PresentStrategy()
        if status == AttendanceStatus.ABSENT:
            return AbsentStrategy()
        return UnpaidDayStrategy()
