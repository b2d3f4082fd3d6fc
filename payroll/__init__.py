"""Payroll system: employees, pay classifications, schedules, methods, affiliations and transactions."""

__version__ = "0.1.0"