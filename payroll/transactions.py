"""Operations that change the payroll database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from payroll.affiliations import ServiceCharge, UnionAffiliation
from payroll.classifications import (
    CommissionedClassification,
    HourlyClassification,
    SalesReceipt,
    TimeCard,
)
from payroll.database import PayrollDatabase
from payroll.employee import Employee
from payroll.errors import PayrollError
from payroll.methods import HoldMethod
from payroll.paycheck import Paycheck
from payroll.strategies import MakeEmployeeStrategy


class Transaction(ABC):
    """One operation applied to a payroll database."""

    @abstractmethod
    def execute(self, database: PayrollDatabase) -> None:
        """Apply the operation, raising PayrollError on failure."""


@dataclass(frozen=True)
class AddEmployeeTransaction(Transaction):
    """Adds an employee whose pay is held by the paymaster."""

    emp_id: int
    name: str
    address: str
    strategy: MakeEmployeeStrategy

    def execute(self, database: PayrollDatabase) -> None:
        employee = Employee(
            self.emp_id,
            self.name,
            self.address,
            classification=self.strategy.make_classification(),
            schedule=self.strategy.make_schedule(),
            method=HoldMethod(),
        )
        database.add_employee(self.emp_id, employee)


@dataclass(frozen=True)
class DeleteEmployeeTransaction(Transaction):
    """Removes an employee."""

    emp_id: int

    def execute(self, database: PayrollDatabase) -> None:
        database.delete_employee(self.emp_id)


@dataclass(frozen=True)
class TimecardTransaction(Transaction):
    """Records hours worked by an hourly employee."""

    day: date
    hours: float
    emp_id: int

    def execute(self, database: PayrollDatabase) -> None:
        employee = database.get_employee(self.emp_id)
        classification = employee.classification
        if not isinstance(classification, HourlyClassification):
            raise PayrollError("tried to add timecard to non-hourly employee")
        classification.add_time_card(TimeCard(self.day, self.hours))


@dataclass(frozen=True)
class SalesReceiptTransaction(Transaction):
    """Records a sale made by a commissioned employee."""

    day: date
    amount: float
    emp_id: int

    def execute(self, database: PayrollDatabase) -> None:
        employee = database.get_employee(self.emp_id)
        classification = employee.classification
        if not isinstance(classification, CommissionedClassification):
            raise PayrollError("tried to add sales receipt to non-commissioned employee")
        classification.add_sales_receipt(SalesReceipt(self.amount, self.day))


@dataclass(frozen=True)
class ServiceChargeTransaction(Transaction):
    """Charges a union member for a union service."""

    member_id: int
    day: date
    charge: float

    def execute(self, database: PayrollDatabase) -> None:
        employee = database.get_union_member(self.member_id)
        affiliation = employee.affiliation
        if not isinstance(affiliation, UnionAffiliation):
            raise PayrollError(
                "tried to add service charge to union member without a union affiliation"
            )
        affiliation.add_service_charge(ServiceCharge(self.day, self.charge))


@dataclass
class PayTransaction(Transaction):
    """Pays every employee whose pay date it is; the paychecks are kept by id."""

    pay_date: date
    paychecks: dict[int, Paycheck] = field(default_factory=dict, init=False)

    def execute(self, database: PayrollDatabase) -> None:
        for emp_id in database.employee_ids():
            employee = database.get_employee(emp_id)
            if employee.is_pay_date(self.pay_date):
                paycheck = Paycheck(self.pay_date)
                employee.payday(paycheck)
                self.paychecks[emp_id] = paycheck