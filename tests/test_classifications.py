from datetime import date, timedelta

import pytest

from payroll.classifications import (
    CommissionedClassification,
    HourlyClassification,
    SalariedClassification,
    SalesReceipt,
    TimeCard,
)
from payroll.errors import NoTimeCardError
from payroll.paycheck import Paycheck

FRIDAY = date(2005, 7, 29)


def _hourly_pay(hours, rate=15.25, day=FRIDAY):
    hc = HourlyClassification(rate)
    hc.add_time_card(TimeCard(day, hours))
    return hc.calculate_pay(Paycheck(FRIDAY))


def test_salaried_pays_salary():
    assert SalariedClassification(1000.0).calculate_pay(Paycheck(FRIDAY)) == 1000.0


def test_time_card_lookup():
    hc = HourlyClassification(15.25)
    d = date(2005, 7, 31)
    hc.add_time_card(TimeCard(d, 8.0))
    assert hc.get_time_card(d).hours == 8.0


def test_time_card_lookup_returns_first_match():
    hc = HourlyClassification(1.0)
    hc.add_time_card(TimeCard(FRIDAY, 3.0))
    hc.add_time_card(TimeCard(FRIDAY, 5.0))
    assert hc.get_time_card(FRIDAY) == TimeCard(FRIDAY, 3.0)


def test_missing_time_card_raises():
    hc = HourlyClassification(15.25)
    with pytest.raises(NoTimeCardError):
        hc.get_time_card(FRIDAY)


def test_hourly_without_cards_pays_nothing():
    assert HourlyClassification(15.25).calculate_pay(Paycheck(FRIDAY)) == 0


def test_hourly_pay_is_proportional_within_standard_hours():
    assert _hourly_pay(8.0) == pytest.approx(2 * _hourly_pay(4.0))


def test_hourly_overtime_pays_more_per_hour():
    base = _hourly_pay(8.0)
    one_over = _hourly_pay(9.0) - base
    two_over = _hourly_pay(10.0) - base
    assert two_over == pytest.approx(2 * one_over)
    assert one_over > _hourly_pay(8.0) - _hourly_pay(7.0)


def test_hourly_ignores_cards_outside_the_week():
    assert _hourly_pay(8.0, day=FRIDAY - timedelta(days=7)) == 0
    assert _hourly_pay(8.0, day=FRIDAY + timedelta(days=1)) == 0
    assert _hourly_pay(8.0, day=FRIDAY - timedelta(days=6)) == _hourly_pay(8.0)


def test_commissioned_without_sales_pays_salary():
    cc = CommissionedClassification(2500.0, 3.2)
    assert cc.calculate_pay(Paycheck(FRIDAY)) == 2500.0


def test_commissioned_adds_commission_on_recent_sales():
    cc = CommissionedClassification(2500.0, 3.2)
    cc.add_sales_receipt(SalesReceipt(1000.0, FRIDAY - timedelta(days=3)))
    one = cc.calculate_pay(Paycheck(FRIDAY))
    cc.add_sales_receipt(SalesReceipt(1000.0, FRIDAY - timedelta(days=13)))
    two = cc.calculate_pay(Paycheck(FRIDAY))
    assert one > 2500.0
    assert two - 2500.0 == pytest.approx(2 * (one - 2500.0))


def test_commissioned_ignores_old_sales():
    cc = CommissionedClassification(2500.0, 3.2)
    cc.add_sales_receipt(SalesReceipt(1000.0, FRIDAY - timedelta(days=14)))
    assert cc.calculate_pay(Paycheck(FRIDAY)) == 2500.0


def test_sales_receipts_are_kept_in_order():
    cc = CommissionedClassification(1000.42, 10.42)
    first = SalesReceipt(42.42, date(2005, 7, 31))
    second = SalesReceipt(10.0, date(2005, 8, 1))
    cc.add_sales_receipt(first)
    cc.add_sales_receipt(second)
    assert cc.sales_receipts == [first, second]
    assert SalesReceipt(42.42, date(2005, 7, 31)) in cc.sales_receipts