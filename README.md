# payroll

A small payroll system. Employees are added and changed through
transactions that run against an in-memory `PayrollDatabase`. Each
employee has a payment classification, a payment schedule, a payment
method and an affiliation.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `payroll` command reads transactions from standard input, one per
line, and runs each in turn until the input ends. It takes no options
apart from `--help`. If a line cannot be parsed or its transaction
fails, the error is logged and the next line is read.

```
printf 'AddEmp 42 Bill Home H 1.23\nAddEmp 43 Ann Office S 2500\n' | payroll
```

Tokens are separated by single spaces. The only transaction the text
format accepts is `AddEmp`. It takes an employee id, a name, an address
and a classification:

- `H <hourly rate>`: hourly, paid weekly on Fridays
- `S <monthly salary>`: salaried, paid on the last day of the month
- `C <monthly salary> <commission rate>`: commissioned, paid every other Friday

New employees are paid by the hold method. The names `DelEmp`,
`TimeCard`, `SalesReceipt`, `ServiceCharge`, `ChgEmp` and `Payday` are
recognised but rejected with `UnsupportedTransactionError`. Any other
line raises `IncorrectInputError`.

## Library use

```python
from datetime import date

from payroll.database import PayrollDatabase
from payroll.strategies import HourlyEmployeeStrategy
from payroll.transactions import (
    AddEmployeeTransaction,
    PayTransaction,
    TimecardTransaction,
)
from payroll.changes import ChangeEmployeeTransaction, ChangeNameStrategy

db = PayrollDatabase()
AddEmployeeTransaction(1, "Bob", "Home", HourlyEmployeeStrategy(15.25)).execute(db)
TimecardTransaction(date(2005, 7, 29), 10.0, 1).execute(db)
ChangeEmployeeTransaction(1, ChangeNameStrategy("Mike")).execute(db)

pay = PayTransaction(date(2005, 7, 29))
pay.execute(db)
print(pay.paychecks[1].net_pay)
```

The modules:

- `payroll.transactions`: `AddEmployeeTransaction`,
  `DeleteEmployeeTransaction`, `TimecardTransaction`,
  `SalesReceiptTransaction`, `ServiceChargeTransaction` and
  `PayTransaction`. Each has `execute(database)`. `PayTransaction` keeps
  the paychecks it produced in `paychecks`, keyed by employee id.
- `payroll.changes`: `ChangeEmployeeTransaction` together with the
  strategies `ChangeNameStrategy`, `ChangeAddressStrategy`,
  `ChangeClassificationStrategy`, `ChangeMethodStrategy` and
  `ChangeAffiliationStrategy`.
- `payroll.strategies`: `SalariedEmployeeStrategy`,
  `HourlyEmployeeStrategy` and `CommissionedEmployeeStrategy`. Each
  builds a matching classification and schedule.
- `payroll.classifications`: the three classifications work as follows.
  - `SalariedClassification` pays its fixed salary.
  - `HourlyClassification` pays for the time cards of the seven days
    ending on the pay date. Hours beyond eight a day are paid at 1.5 times
    the rate.
  - `CommissionedClassification` pays its salary plus `commission_rate`
    percent of the sales receipts of the fourteen days ending on the pay
    date.
- `payroll.schedules`: `WeeklySchedule` pays on Fridays and
  `MonthlySchedule` on the last day of the month. `BiweeklySchedule`
  pays every other Friday it is asked about, skipping the first.
- `payroll.methods`: the payment methods work as follows.
  - `HoldMethod` keeps paychecks in `paychecks`.
  - `DirectMethod` keeps them in `deposits`.
  - `MailMethod` prints a line for each paycheck.
- `payroll.affiliations`: `NoAffiliation` deducts nothing.
  `UnionAffiliation` deducts its `dues` plus the service charges of the
  seven days ending on the pay date.
- `payroll.parser`: `parse_line` and `TextParserTransactionSource`.
- `payroll.application`: `PayrollApplication` and `main`.
- `payroll.errors`: `PayrollError` is the base exception. The others are
  `EmployeeNotFoundError`, `UnionMemberNotFoundError` and
  `NoTimeCardError`.

## What it does not do

Employees live only in memory. The command starts each run with an
empty database and saves nothing. Time cards, sales receipts, service
charges, changes, deletions and pay runs are available only from
Python, not from the text input. Paychecks are not written anywhere
except by `MailMethod`.