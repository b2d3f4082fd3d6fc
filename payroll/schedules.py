"""When employees get paid."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta

_FRIDAY = 4


def is_last_day_of_month(day: date) -> bool:
    """True if the next calendar day falls in another month."""
    return (day + timedelta(days=1)).month != day.month


class PaymentSchedule(ABC):
    """Decides whether a given day is a pay date."""

    @abstractmethod
    def is_payday(self, day: date) -> bool:
        """Return True if the employee is paid on this day."""


@dataclass
class WeeklySchedule(PaymentSchedule):
    """Paid every Friday."""

    def is_payday(self, day: date) -> bool:
        return day.weekday() == _FRIDAY


@dataclass
class BiweeklySchedule(PaymentSchedule):
    """Paid every other Friday; the first Friday asked about is skipped."""

    second_friday: bool = field(default=False, repr=False)

    def is_payday(self, day: date) -> bool:
        if day.weekday() != _FRIDAY:
            return False
        payday = self.second_friday
        self.second_friday = not self.second_friday
        return payday


@dataclass
class MonthlySchedule(PaymentSchedule):
    """Paid on the last day of each month."""

    def is_payday(self, day: date) -> bool:
        return is_last_day_of_month(day)