from datetime import date

import pytest

from payroll.affiliations import NoAffiliation, ServiceCharge, UnionAffiliation
from payroll.classifications import SalariedClassification
from payroll.employee import Employee
from payroll.methods import HoldMethod
from payroll.paycheck import Paycheck
from payroll.schedules import MonthlySchedule, WeeklySchedule

LAST_OF_JULY = date(2005, 7, 31)


def _salaried(salary=1000.0, affiliation=None):
    e = Employee(1, "Bob", "Home")
    e.classification = SalariedClassification(salary)
    e.schedule = MonthlySchedule()
    e.method = HoldMethod()
    if affiliation is not None:
        e.affiliation = affiliation
    return e


def test_new_employee_has_no_affiliation():
    e = Employee(42, "Bill", "Home")
    assert (e.emp_id, e.name, e.address) == (42, "Bill", "Home")
    assert e.affiliation == NoAffiliation()


def test_is_pay_date_follows_schedule():
    e = _salaried()
    assert e.is_pay_date(LAST_OF_JULY)
    assert not e.is_pay_date(date(2005, 7, 29))
    e.schedule = WeeklySchedule()
    assert e.is_pay_date(date(2005, 7, 29))


def test_payday_without_affiliation():
    e = _salaried(1000.0)
    pc = Paycheck(LAST_OF_JULY)
    e.payday(pc)
    assert pc.gross_pay == 1000.0
    assert pc.deductions == 0.0
    assert pc.net_pay == pc.gross_pay
    assert e.method.paychecks == [pc]


def test_payday_deducts_union_fee():
    union = UnionAffiliation(9.42)
    union.add_service_charge(ServiceCharge(LAST_OF_JULY, 19.42))
    e = _salaried(1000.0, union)
    pc = Paycheck(LAST_OF_JULY)
    e.payday(pc)
    assert pc.deductions == pytest.approx(union.get_fee(pc))
    assert pc.net_pay == pytest.approx(pc.gross_pay - pc.deductions)
    assert pc.net_pay < pc.gross_pay