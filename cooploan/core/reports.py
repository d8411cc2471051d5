"""Reports — portfolio summary, per-organization breakdown and monthly trends.

Invariants:
    - Pure functions of store state (and as_of for trends)
    - Amounts are Decimal sums quantized to cents; rates are percent with 2 decimals
    - Organization breakdown follows member.organization_id at report time
    - Monthly trends list exactly `months` tokens, oldest first, zero-filled
"""

from datetime import datetime
from decimal import Decimal

from cooploan.core.domain_types import LoanStatus, ZERO, to_cents
from cooploan.core.months import last_months
from cooploan.core.repository_protocols import EntityReader


def _total(values) -> Decimal:
    return to_cents(sum(values, ZERO))


def portfolio_summary(store: EntityReader) -> dict:
    """Totals across all loans, repayments and contributions."""
    members = store.list_members()
    loans = store.list_loans()
    repayments = store.list_repayments()
    contributions = store.list_contributions()

    total_loan_amount = _total(loan.amount for loan in loans)
    return {
        "total_organizations": len(store.list_organizations()),
        "total_members": len(members),
        "active_members": sum(1 for m in members if m.is_active),
        "total_loans": len(loans),
        "active_loans": sum(1 for loan in loans if loan.status == LoanStatus.ACTIVE),
        "total_loan_amount": total_loan_amount,
        "active_loan_amount": _total(
            loan.amount for loan in loans if loan.status == LoanStatus.ACTIVE
        ),
        "total_repayments": len(repayments),
        "total_repayment_amount": _total(r.amount for r in repayments),
        "total_contributions": len(contributions),
        "total_contribution_amount": _total(c.amount_paid for c in contributions),
        "average_loan_amount": (
            to_cents(total_loan_amount / len(loans)) if loans else ZERO
        ),
        "repayment_rate": (
            to_cents(Decimal(len(repayments)) / len(loans) * 100) if loans else ZERO
        ),
    }


def organization_breakdown(store: EntityReader) -> list[dict]:
    """One row per organization, in organization id order."""
    repayments = store.list_repayments()
    contributions = store.list_contributions()
    rows = []
    for org in store.list_organizations():
        member_ids = {m.id for m in store.list_members_by_organization(org.id)}
        loans = store.list_loans_by_organization(org.id)
        loan_ids = {loan.id for loan in loans}
        org_repayments = [r for r in repayments if r.loan_id in loan_ids]
        org_contributions = [c for c in contributions if c.member_id in member_ids]
        rows.append({
            "organization_id": org.id,
            "organization_name": org.name,
            "member_count": len(member_ids),
            "loan_count": len(loans),
            "total_loan_amount": _total(loan.amount for loan in loans),
            "repayment_count": len(org_repayments),
            "total_repayment_amount": _total(r.amount for r in org_repayments),
            "contribution_count": len(org_contributions),
            "total_contribution_amount": _total(
                c.amount_paid for c in org_contributions
            ),
        })
    return rows


def monthly_trends(store: EntityReader, as_of: datetime, months: int = 6) -> list[dict]:
    """Repayment and contribution activity for the last `months` months."""
    repayments = store.list_repayments()
    contributions = store.list_contributions()
    rows = []
    for month in last_months(as_of, months):
        month_repayments = [r for r in repayments if r.payment_month == month]
        month_contributions = [c for c in contributions if c.month == month]
        rows.append({
            "month": month,
            "repayments": len(month_repayments),
            "repayment_amount": _total(r.amount for r in month_repayments),
            "contributions": len(month_contributions),
            "contribution_amount": _total(c.amount_paid for c in month_contributions),
        })
    return rows
