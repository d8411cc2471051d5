"""Dashboard Statistics — counters by full scan, deterministic."""

from datetime import datetime, timezone
from decimal import Decimal

from cooploan.core.domain_types import LoanStatus
from cooploan.core.statistics import compute_statistics
from tests.factories import (
    add_loan, add_member, add_organization, add_profit, add_repayment,
)

AS_OF = datetime(2024, 6, 15, tzinfo=timezone.utc)


def test_empty_store_returns_zero_stats(store):
    stats = compute_statistics(store, AS_OF)
    assert stats.total_organizations == 0
    assert stats.total_members == 0
    assert stats.active_loans == 0
    assert stats.pending_applications == 0
    assert stats.active_loan_amount == Decimal("0.00")
    assert stats.total_profit == Decimal("0.00")
    assert stats.overdue_payments == 0


def test_counts_only_active_members(store):
    add_member(store)
    add_member(store, is_active=False)
    assert compute_statistics(store, AS_OF).total_members == 1


def test_loan_counters_by_status(store):
    member = add_member(store)
    add_loan(store, member.id)
    add_loan(store, member.id)
    add_loan(store, member.id, status=LoanStatus.REJECTED)
    active = add_loan(
        store, member.id, amount="1200", rate="0",
        status=LoanStatus.ACTIVE, start_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
    )
    add_repayment(store, active.id, "200.00", "2024-06")

    stats = compute_statistics(store, AS_OF)
    assert stats.pending_applications == 2
    assert stats.active_loans == 1
    assert stats.active_loan_amount == Decimal("1000.00")


def test_total_profit_sums_all_years(store):
    add_profit(store, 2022, total="1000.50")
    add_profit(store, 2023, total="2000.25")
    assert compute_statistics(store, AS_OF).total_profit == Decimal("3000.75")


def test_overdue_payments_counts_loans_with_missed_months(store):
    member = add_member(store)
    add_loan(
        store, member.id, status=LoanStatus.ACTIVE,
        start_date=datetime(2024, 1, 10, tzinfo=timezone.utc),
    )
    assert compute_statistics(store, AS_OF).overdue_payments == 1


def test_statistics_are_idempotent(store):
    org = add_organization(store)
    member = add_member(store, organization_id=org.id)
    add_loan(store, member.id, status=LoanStatus.ACTIVE, start_date=AS_OF)
    add_profit(store, 2023)
    assert compute_statistics(store, AS_OF) == compute_statistics(store, AS_OF)
