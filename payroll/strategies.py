"""Factories for the pay arrangements of each kind of employee."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from payroll.classifications import (
    CommissionedClassification,
    HourlyClassification,
    PaymentClassification,
    SalariedClassification,
)
from payroll.schedules import (
    BiweeklySchedule,
    MonthlySchedule,
    PaymentSchedule,
    WeeklySchedule,
)


class MakeEmployeeStrategy(ABC):
    """Builds a matching classification and schedule for an employee."""

    @abstractmethod
    def make_classification(self) -> PaymentClassification:
        """Return a new payment classification."""

    @abstractmethod
    def make_schedule(self) -> PaymentSchedule:
        """Return a new payment schedule."""


@dataclass(frozen=True)
class SalariedEmployeeStrategy(MakeEmployeeStrategy):
    """A salaried employee, paid monthly."""

    salary: float

    def make_classification(self) -> SalariedClassification:
        return SalariedClassification(self.salary)

    def make_schedule(self) -> MonthlySchedule:
        return MonthlySchedule()


@dataclass(frozen=True)
class HourlyEmployeeStrategy(MakeEmployeeStrategy):
    """An hourly employee, paid weekly."""

    hourly_rate: float

    def make_classification(self) -> HourlyClassification:
        return HourlyClassification(self.hourly_rate)

    def make_schedule(self) -> WeeklySchedule:
        return WeeklySchedule()


@dataclass(frozen=True)
class CommissionedEmployeeStrategy(MakeEmployeeStrategy):
    """A commissioned employee, paid every other Friday."""

    salary: float
    commission_rate: float

    def make_classification(self) -> CommissionedClassification:
        return CommissionedClassification(self.salary, self.commission_rate)

    def make_schedule(self) -> BiweeklySchedule:
        return BiweeklySchedule()