"""Exceptions raised by the payroll system."""


class PayrollError(Exception):
    """Base class for every payroll failure."""


class EmployeeNotFoundError(PayrollError, LookupError):
    """No employee is stored under the requested id."""

    def __init__(self, message: str = "employee not found") -> None:
        super().__init__(message)


class UnionMemberNotFoundError(PayrollError, LookupError):
    """No union member is stored under the requested member id."""

    def __init__(self, message: str = "union member not found") -> None:
        super().__init__(message)


class NoTimeCardError(PayrollError, LookupError):
    """An hourly employee has no time card for the requested day."""

    def __init__(self, message: str = "timecard not found") -> None:
        super().__init__(message)