"""Reading transactions from lines of text."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import TextIO

from payroll.errors import PayrollError
from payroll.strategies import (
    CommissionedEmployeeStrategy,
    HourlyEmployeeStrategy,
    MakeEmployeeStrategy,
    SalariedEmployeeStrategy,
)
from payroll.transactions import AddEmployeeTransaction, Transaction

_INTEGER = re.compile(r"[+-]?[0-9]+")
_UNSUPPORTED = frozenset(
    {"DelEmp", "TimeCard", "SalesReceipt", "ServiceCharge", "ChgEmp", "Payday"}
)


class IncorrectInputError(PayrollError, ValueError):
    """A line of input could not be understood."""

    def __init__(self, message: str = "input line is incorrect") -> None:
        super().__init__(message)


class UnsupportedTransactionError(PayrollError):
    """A known transaction name that the text format does not accept."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} transactions are not supported")
        self.name = name


def _parse_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise IncorrectInputError()
    return int(token)


def _parse_float(token: str) -> float:
    if "_" in token or token.strip() != token:
        raise IncorrectInputError()
    try:
        return float(token)
    except ValueError:
        raise IncorrectInputError() from None


def _parse_rates(tokens: list[str], count: int) -> list[float]:
    if len(tokens) != count:
        raise IncorrectInputError()
    return [_parse_float(token) for token in tokens]


def _parse_add_employee(tokens: list[str]) -> Transaction:
    if len(tokens) < 5:
        raise IncorrectInputError()
    emp_id = _parse_int(tokens[1])
    name, address, kind = tokens[2], tokens[3], tokens[4]
    rates = tokens[5:]

    strategy: MakeEmployeeStrategy
    if kind == "H":
        (hourly_rate,) = _parse_rates(rates, 1)
        strategy = HourlyEmployeeStrategy(hourly_rate)
    elif kind == "S":
        (salary,) = _parse_rates(rates, 1)
        strategy = SalariedEmployeeStrategy(salary)
    elif kind == "C":
        salary, commission_rate = _parse_rates(rates, 2)
        strategy = CommissionedEmployeeStrategy(salary, commission_rate)
    else:
        raise IncorrectInputError()

    return AddEmployeeTransaction(emp_id, name, address, strategy)


def parse_line(line: str) -> Transaction:
    """Turn one space-separated line into a transaction."""
    tokens = line.split(" ")
    if len(tokens) <= 1:
        raise IncorrectInputError()

    name = tokens[0]
    if name == "AddEmp":
        return _parse_add_employee(tokens)
    if name in _UNSUPPORTED:
        raise UnsupportedTransactionError(name)
    raise IncorrectInputError()


class TextParserTransactionSource:
    """Reads transactions one line at a time from a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def get_transaction(self) -> Transaction:
        """Parse the next line; raise EOFError once the stream is exhausted."""
        line = self._stream.readline()
        if not line:
            raise EOFError("no more transactions")
        return parse_line(line.removesuffix("\n").removesuffix("\r"))

    def __iter__(self) -> Iterator[Transaction]:
        while True:
            try:
                transaction = self.get_transaction()
            except EOFError:
                return
            yield transaction