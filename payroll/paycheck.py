"""The paycheck produced for an employee on a pay date."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Paycheck:
    """Amounts paid to one employee on one pay date."""

    pay_date: date
    gross_pay: float = 0.0
    deductions: float = 0.0
    net_pay: float = 0.0