"""The payroll application: applies transactions from a source to a database."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Protocol

from payroll.database import PayrollDatabase
from payroll.errors import PayrollError
from payroll.parser import TextParserTransactionSource
from payroll.transactions import Transaction

_log = logging.getLogger(__name__)


class _TransactionSource(Protocol):
    def get_transaction(self) -> Transaction: ...


class PayrollApplication:
    """Runs every transaction a source yields against one database."""

    def __init__(
        self, source: _TransactionSource, database: PayrollDatabase | None = None
    ) -> None:
        self.source = source
        self.database = database if database is not None else PayrollDatabase()

    def run(self) -> int:
        """Process transactions until the source is exhausted.

        Failures are logged and skipped. Returns how many transactions succeeded.
        """
        executed = 0
        while True:
            try:
                transaction = self.source.get_transaction()
            except EOFError:
                return executed
            except PayrollError as err:
                _log.error("%s", err)
                continue
            try:
                transaction.execute(self.database)
            except PayrollError as err:
                _log.error("%s", err)
                continue
            executed += 1


def main(argv: list[str] | None = None) -> int:
    """Read transactions from standard input, one per line, and apply them."""
    parser = argparse.ArgumentParser(
        prog="payroll",
        description="Apply payroll transactions read from standard input.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    app = PayrollApplication(TextParserTransactionSource(sys.stdin))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())