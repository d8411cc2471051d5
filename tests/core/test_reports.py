"""Reports — portfolio summary, organization breakdown, monthly trends."""

from datetime import datetime, timezone
from decimal import Decimal

from cooploan.core.reports import monthly_trends, organization_breakdown, portfolio_summary
from tests.factories import (
    add_contribution, add_loan, add_member, add_organization, add_repayment,
)


def test_portfolio_summary_on_empty_store(store):
    summary = portfolio_summary(store)
    assert summary["total_loans"] == 0
    assert summary["average_loan_amount"] == Decimal("0.00")
    assert summary["repayment_rate"] == Decimal("0.00")


def test_portfolio_summary_totals(store):
    member = add_member(store)
    loan = add_loan(store, member.id, amount="1000.00")
    add_loan(store, member.id, amount="3000.00")
    add_repayment(store, loan.id, "100.00", "2024-01")
    add_contribution(store, member.id, "2024-01", "25.00")

    summary = portfolio_summary(store)
    assert summary["total_loan_amount"] == Decimal("4000.00")
    assert summary["average_loan_amount"] == Decimal("2000.00")
    assert summary["total_repayment_amount"] == Decimal("100.00")
    assert summary["total_contribution_amount"] == Decimal("25.00")
    assert summary["repayment_rate"] == Decimal("50.00")


def test_organization_breakdown_groups_by_member_organization(store):
    north = add_organization(store, "North")
    south = add_organization(store, "South")
    alice = add_member(store, organization_id=north.id)
    add_member(store, organization_id=north.id)
    bob = add_member(store, organization_id=south.id)
    loan = add_loan(store, alice.id, amount="500.00")
    add_loan(store, bob.id, amount="700.00")
    add_repayment(store, loan.id, "50.00", "2024-02")
    add_contribution(store, alice.id, "2024-02", "10.00")

    rows = {row["organization_name"]: row for row in organization_breakdown(store)}
    assert rows["North"]["member_count"] == 2
    assert rows["North"]["loan_count"] == 1
    assert rows["North"]["total_loan_amount"] == Decimal("500.00")
    assert rows["North"]["repayment_count"] == 1
    assert rows["North"]["total_contribution_amount"] == Decimal("10.00")
    assert rows["South"]["total_loan_amount"] == Decimal("700.00")
    assert rows["South"]["repayment_count"] == 0


def test_monthly_trends_zero_fill_and_order(store):
    member = add_member(store)
    loan = add_loan(store, member.id)
    add_repayment(store, loan.id, "888.49", "2024-05")
    add_contribution(store, member.id, "2024-04", "40.00")

    rows = monthly_trends(store, datetime(2024, 6, 15, tzinfo=timezone.utc), months=3)
    assert [r["month"] for r in rows] == ["2024-04", "2024-05", "2024-06"]
    assert rows[0]["contribution_amount"] == Decimal("40.00")
    assert rows[1]["repayments"] == 1
    assert rows[1]["repayment_amount"] == Decimal("888.49")
    assert rows[2]["repayments"] == 0
