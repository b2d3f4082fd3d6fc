"""An employee and how they are paid."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from payroll.affiliations import Affiliation, NoAffiliation
from payroll.classifications import PaymentClassification
from payroll.methods import PaymentMethod
from payroll.paycheck import Paycheck
from payroll.schedules import PaymentSchedule


@dataclass
class Employee:
    """A person on the payroll together with their pay arrangements."""

    emp_id: int
    name: str
    address: str
    classification: PaymentClassification | None = None
    schedule: PaymentSchedule | None = None
    method: PaymentMethod | None = None
    affiliation: Affiliation = field(default_factory=NoAffiliation)

    def is_pay_date(self, day: date) -> bool:
        return self.schedule.is_payday(day)

    def payday(self, paycheck: Paycheck) -> None:
        """Fill in the paycheck's amounts and deliver it."""
        gross = self.classification.calculate_pay(paycheck)
        deductions = self.affiliation.get_fee(paycheck)
        paycheck.gross_pay = gross
        paycheck.deductions = deductions
        paycheck.net_pay = gross - deductions
        self.method.pay(paycheck)