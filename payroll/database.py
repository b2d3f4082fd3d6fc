"""In-memory storage for employees and union members."""

from __future__ import annotations

from dataclasses import dataclass, field

from payroll.employee import Employee
from payroll.errors import EmployeeNotFoundError, UnionMemberNotFoundError


@dataclass
class PayrollDatabase:
    """Employees keyed by employee id and union members keyed by member id."""

    employees: dict[int, Employee] = field(default_factory=dict)
    members: dict[int, Employee] = field(default_factory=dict)

    def add_employee(self, emp_id: int, employee: Employee) -> None:
        """Store the employee, replacing any employee with the same id."""
        self.employees[emp_id] = employee

    def get_employee(self, emp_id: int) -> Employee:
        """Return the employee with the id, or raise EmployeeNotFoundError."""
        try:
            return self.employees[emp_id]
        except KeyError:
            raise EmployeeNotFoundError() from None

    def employee_ids(self) -> list[int]:
        """Return the ids of every stored employee."""
        return list(self.employees)

    def delete_employee(self, emp_id: int) -> None:
        """Remove the employee; removing an unknown id does nothing."""
        self.employees.pop(emp_id, None)

    def add_union_member(self, member_id: int, employee: Employee) -> None:
        """Register the employee as the union member with the member id."""
        self.members[member_id] = employee

    def get_union_member(self, member_id: int) -> Employee:
        """Return the union member, or raise UnionMemberNotFoundError."""
        try:
            return self.members[member_id]
        except KeyError:
            raise UnionMemberNotFoundError() from None