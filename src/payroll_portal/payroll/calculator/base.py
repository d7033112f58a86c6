from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...profiles.model import SalaryProfile


@dataclass(frozen=True)
class DayEarnings:
    daily_salary: float
    ot_amount: float
    tiffin: float
    night: float
    total: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_salary(self, profile: SalaryProfile) -> float:
        raise NotImplementedError

    @abstractmethod
    def present_day(self, profile: SalaryProfile, *, ot_hours: float, is_friday: bool) -> DayEarnings:
        raise NotImplementedError

    @abstractmethod
    def absent_deduction(self, profile: SalaryProfile) -> float:
        raise NotImplementedError

    @abstractmethod
    def ot_amount(self, profile: SalaryProfile, ot_hours: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def monthly_bonus(self, profile: SalaryProfile, *, absent_days: int) -> float:
        raise NotImplementedError
