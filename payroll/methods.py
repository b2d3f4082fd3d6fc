"""How a paycheck reaches the employee."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TextIO

from payroll.paycheck import Paycheck


class PaymentMethod(ABC):
    """Delivers a computed paycheck."""

    @abstractmethod
    def pay(self, paycheck: Paycheck) -> None:
        """Deliver the paycheck."""


@dataclass
class HoldMethod(PaymentMethod):
    """Keeps paychecks with the paymaster until they are picked up."""

    paychecks: list[Paycheck] = field(default_factory=list, compare=False)

    def pay(self, paycheck: Paycheck) -> None:
        self.paychecks.append(paycheck)


@dataclass
class DirectMethod(PaymentMethod):
    """Deposits paychecks into a bank account."""

    bank: str = ""
    account: str = ""
    deposits: list[Paycheck] = field(default_factory=list, compare=False)

    def pay(self, paycheck: Paycheck) -> None:
        self.deposits.append(paycheck)


@dataclass
class MailMethod(PaymentMethod):
    """Mails paychecks to an address, reporting each one on a stream."""

    address: str = ""
    out: TextIO | None = field(default=None, compare=False, repr=False)

    def pay(self, paycheck: Paycheck) -> None:
        print(f"Payed {paycheck.net_pay:.2f} by MailMethod", file=self.out)