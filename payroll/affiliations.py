"""Memberships that deduct fees from an employee's pay."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta

from payroll.paycheck import Paycheck

_FEE_PERIOD = timedelta(days=7)


@dataclass(frozen=True)
class ServiceCharge:
    """A one-off charge levied by the union on a given day."""

    day: date
    amount: float


class Affiliation(ABC):
    """Computes deductions for a paycheck."""

    @abstractmethod
    def get_fee(self, paycheck: Paycheck) -> float:
        """Return the amount deducted from the paycheck."""


@dataclass
class NoAffiliation(Affiliation):
    """No membership, so nothing is deducted."""

    def get_fee(self, paycheck: Paycheck) -> float:
        return 0.0


@dataclass
class UnionAffiliation(Affiliation):
    """Union membership with dues and service charges."""

    dues: float = 0.0
    service_charges: list[ServiceCharge] = field(default_factory=list)

    def add_service_charge(self, charge: ServiceCharge) -> None:
        self.service_charges.append(charge)

    def get_service_charge(self, day: date) -> ServiceCharge | None:
        """Return the latest charge made on the day, or None if there is none."""
        matches = [charge for charge in self.service_charges if charge.day == day]
        return matches[-1] if matches else None

    def get_fee(self, paycheck: Paycheck) -> float:
        """Dues plus the charges of the week that ends on the pay date."""
        end = paycheck.pay_date
        charges = sum(
            charge.amount
            for charge in self.service_charges
            if end - _FEE_PERIOD < charge.day <= end
        )
        return self.dues + charges