import pytest

from payroll.database import PayrollDatabase
from payroll.employee import Employee
from payroll.errors import EmployeeNotFoundError, PayrollError, UnionMemberNotFoundError


@pytest.fixture
def db():
    return PayrollDatabase()


def test_add_then_get_returns_same_employee(db):
    emp = Employee(1, "Bob", "Home")
    db.add_employee(1, emp)
    assert db.get_employee(1) is emp


def test_get_missing_employee_raises(db):
    with pytest.raises(EmployeeNotFoundError, match="employee not found"):
        db.get_employee(99)


def test_missing_employee_error_is_payroll_error(db):
    with pytest.raises(PayrollError):
        db.get_employee(5)


def test_add_replaces_existing(db):
    db.add_employee(1, Employee(1, "Bob", "Home"))
    replacement = Employee(1, "Mike", "Work")
    db.add_employee(1, replacement)
    assert db.get_employee(1) is replacement
    assert db.employee_ids() == [1]


def test_employee_ids_lists_all(db):
    for emp_id in (3, 1, 2):
        db.add_employee(emp_id, Employee(emp_id, "x", "y"))
    assert sorted(db.employee_ids()) == [1, 2, 3]


def test_employee_ids_empty(db):
    assert db.employee_ids() == []


def test_delete_employee_removes_it(db):
    db.add_employee(4, Employee(4, "Bill", "Home"))
    db.delete_employee(4)
    with pytest.raises(EmployeeNotFoundError):
        db.get_employee(4)
    assert db.employee_ids() == []


def test_delete_unknown_employee_leaves_others(db):
    emp = Employee(1, "Bob", "Home")
    db.add_employee(1, emp)
    db.delete_employee(2)
    assert db.get_employee(1) is emp


def test_union_member_round_trip(db):
    emp = Employee(2, "Bill", "Home")
    db.add_union_member(86, emp)
    assert db.get_union_member(86) is emp


def test_missing_union_member_raises(db):
    with pytest.raises(UnionMemberNotFoundError, match="union member not found"):
        db.get_union_member(86)


def test_union_members_separate_from_employees(db):
    emp = Employee(2, "Bill", "Home")
    db.add_union_member(86, emp)
    with pytest.raises(EmployeeNotFoundError):
        db.get_employee(86)