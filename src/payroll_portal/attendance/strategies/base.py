from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...payroll.calculator.base import PayrollCalculator
from ...profiles.model import SalaryProfile
from ..model import AttendanceEvent


@dataclass(frozen=True)
class DailyEntry:
    work_hours: float
    ot_hours: float
    earned: float
    deduction: float
    details: str

    @property
    def total_hours(self) -> float:
        return self.work_hours + self.ot_hours


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one status turns into money."""

    requires_profile: bool = False

    @abstractmethod
    def evaluate(
        self,
        event: AttendanceEvent,
        *,
        profile: Optional[SalaryProfile],
        calculator: PayrollCalculator,
    ) -> DailyEntry:
        raise NotImplementedError
