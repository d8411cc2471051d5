"""Delinquency Policy — missed repayment months on servicing loans."""

from datetime import datetime, timezone

from cooploan.core.delinquency import due_months, is_overdue, missed_months, overdue_loans
from cooploan.core.domain_types import LoanStatus
from tests.factories import add_loan, add_member, add_repayment

STARTED = datetime(2024, 2, 20, tzinfo=timezone.utc)
AS_OF = datetime(2024, 6, 15, tzinfo=timezone.utc)


def _active_loan(store, start=STARTED):
    member = add_member(store)
    return add_loan(store, member.id, status=LoanStatus.ACTIVE, start_date=start)


def test_due_months_run_from_month_after_start_to_previous_month(store):
    loan = _active_loan(store)
    assert due_months(loan, AS_OF) == ["2024-03", "2024-04", "2024-05"]


def test_loan_started_this_month_has_nothing_due(store):
    loan = _active_loan(store, start=datetime(2024, 6, 1, tzinfo=timezone.utc))
    assert due_months(loan, AS_OF) == []
    assert not is_overdue(loan, [], AS_OF)


def test_pending_loan_is_never_overdue(store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    assert due_months(loan, AS_OF) == []


def test_missed_months_lists_unpaid_due_months(store):
    loan = _active_loan(store)
    add_repayment(store, loan.id, "888.49", "2024-03")
    add_repayment(store, loan.id, "888.49", "2024-05")
    repayments = store.list_repayments_by_loan(loan.id)
    assert missed_months(store.get_loan(loan.id), repayments, AS_OF) == ["2024-04"]


def test_fully_paid_schedule_is_not_overdue(store):
    loan = _active_loan(store)
    for month in ("2024-03", "2024-04", "2024-05"):
        add_repayment(store, loan.id, "888.49", month)
    loan = store.get_loan(loan.id)
    assert not is_overdue(loan, store.list_repayments_by_loan(loan.id), AS_OF)


def test_zero_balance_loan_is_not_overdue(store):
    loan = _active_loan(store)
    add_repayment(store, loan.id, "20000.00", "2024-03")
    loan = store.get_loan(loan.id)
    assert loan.remaining_balance == 0
    assert not is_overdue(loan, store.list_repayments_by_loan(loan.id), AS_OF)


def test_overdue_loans_scans_store(store):
    late = _active_loan(store)
    on_time = _active_loan(store)
    for month in ("2024-03", "2024-04", "2024-05"):
        add_repayment(store, on_time.id, "888.49", month)
    assert [loan.id for loan in overdue_loans(store, AS_OF)] == [late.id]
