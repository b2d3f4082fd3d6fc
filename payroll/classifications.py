"""How an employee's gross pay is calculated."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta

from payroll.errors import NoTimeCardError
from payroll.paycheck import Paycheck

_STANDARD_HOURS = 8.0
_OVERTIME_FACTOR = 1.5
_HOURLY_PERIOD = timedelta(days=7)
_COMMISSION_PERIOD = timedelta(days=14)


def _in_period(day: date, pay_date: date, length: timedelta) -> bool:
    return pay_date - length < day <= pay_date


class PaymentClassification(ABC):
    """Computes the gross pay for a paycheck."""

    @abstractmethod
    def calculate_pay(self, paycheck: Paycheck) -> float:
        """Return the gross pay due on the paycheck's date."""


@dataclass(frozen=True)
class TimeCard:
    """Hours an hourly employee worked on one day."""

    day: date
    hours: float


@dataclass(frozen=True)
class SalesReceipt:
    """A sale made by a commissioned employee."""

    amount: float
    day: date


@dataclass
class SalariedClassification(PaymentClassification):
    """A fixed salary paid every pay date."""

    salary: float

    def calculate_pay(self, paycheck: Paycheck) -> float:
        return self.salary


@dataclass
class HourlyClassification(PaymentClassification):
    """Pay by the hour, with overtime beyond eight hours a day."""

    hourly_rate: float
    time_cards: list[TimeCard] = field(default_factory=list)

    def add_time_card(self, card: TimeCard) -> None:
        self.time_cards.append(card)

    def get_time_card(self, day: date) -> TimeCard:
        """Return the first time card for the day, or raise NoTimeCardError."""
        for card in self.time_cards:
            if card.day == day:
                return card
        raise NoTimeCardError()

    def calculate_pay(self, paycheck: Paycheck) -> float:
        """Pay for the cards of the week that ends on the pay date."""
        return sum(
            self._pay_for(card)
            for card in self.time_cards
            if _in_period(card.day, paycheck.pay_date, _HOURLY_PERIOD)
        )

    def _pay_for(self, card: TimeCard) -> float:
        straight = min(card.hours, _STANDARD_HOURS)
        overtime = max(card.hours - _STANDARD_HOURS, 0.0)
        return self.hourly_rate * (straight + _OVERTIME_FACTOR * overtime)


@dataclass
class CommissionedClassification(PaymentClassification):
    """A salary plus a commission, in percent, on recent sales."""

    salary: float
    commission_rate: float
    sales_receipts: list[SalesReceipt] = field(default_factory=list)

    def add_sales_receipt(self, receipt: SalesReceipt) -> None:
        self.sales_receipts.append(receipt)

    def calculate_pay(self, paycheck: Paycheck) -> float:
        """Salary plus commission on sales of the two weeks ending on the pay date."""
        sales = sum(
            receipt.amount
            for receipt in self.sales_receipts
            if _in_period(receipt.day, paycheck.pay_date, _COMMISSION_PERIOD)
        )
        return self.salary + sales * self.commission_rate / 100.0