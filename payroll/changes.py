"""Transactions that alter an existing employee's record."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from payroll.affiliations import Affiliation
from payroll.database import PayrollDatabase
from payroll.employee import Employee
from payroll.methods import PaymentMethod
from payroll.strategies import MakeEmployeeStrategy
from payroll.transactions import Transaction


class ChangeEmployeeStrategy(ABC):
    """Produces an altered copy of an employee."""

    @abstractmethod
    def change(self, employee: Employee) -> Employee:
        """Return the employee with the change applied."""


@dataclass(frozen=True)
class ChangeEmployeeTransaction(Transaction):
    """Replaces a stored employee with the result of a change strategy."""

    emp_id: int
    strategy: ChangeEmployeeStrategy

    def execute(self, database: PayrollDatabase) -> None:
        employee = database.get_employee(self.emp_id)
        changed = self.strategy.change(employee)
        database.delete_employee(self.emp_id)
        database.add_employee(self.emp_id, changed)


@dataclass(frozen=True)
class ChangeNameStrategy(ChangeEmployeeStrategy):
    """Gives the employee a new name."""

    name: str

    def change(self, employee: Employee) -> Employee:
        return replace(employee, name=self.name)


@dataclass(frozen=True)
class ChangeAddressStrategy(ChangeEmployeeStrategy):
    """Gives the employee a new address."""

    address: str

    def change(self, employee: Employee) -> Employee:
        return replace(employee, address=self.address)


@dataclass(frozen=True)
class ChangeClassificationStrategy(ChangeEmployeeStrategy):
    """Switches the employee to another kind of pay and its schedule."""

    strategy: MakeEmployeeStrategy

    def change(self, employee: Employee) -> Employee:
        return replace(
            employee,
            classification=self.strategy.make_classification(),
            schedule=self.strategy.make_schedule(),
        )


@dataclass(frozen=True)
class ChangeMethodStrategy(ChangeEmployeeStrategy):
    """Changes how the employee's paychecks are delivered."""

    method: PaymentMethod

    def change(self, employee: Employee) -> Employee:
        return replace(employee, method=self.method)


@dataclass(frozen=True)
class ChangeAffiliationStrategy(ChangeEmployeeStrategy):
    """Changes the employee's membership affiliation."""

    affiliation: Affiliation

    def change(self, employee: Employee) -> Employee:
        return replace(employee, affiliation=self.affiliation)