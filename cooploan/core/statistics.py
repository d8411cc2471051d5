"""Dashboard Statistics — counters derived by full scan of the store.

Invariants:
    - Pure and deterministic: same store state + same as_of -> identical snapshot
    - Money sums are Decimal quantized to cents
    - overdue_payments counts loans under core/delinquency.py policy
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from cooploan.core.delinquency import overdue_loans
from cooploan.core.domain_types import LoanStatus, ZERO, to_cents
from cooploan.core.repository_protocols import EntityReader


@dataclass(frozen=True)
class StatisticsSnapshot:
    total_organizations: int
    total_members: int
    active_loans: int
    total_profit: Decimal
    active_loan_amount: Decimal
    pending_applications: int
    overdue_payments: int


def compute_statistics(store: EntityReader, as_of: datetime) -> StatisticsSnapshot:
    """Aggregate the dashboard counters. No IO beyond store reads."""
    loans = store.list_loans()
    active = [loan for loan in loans if loan.status == LoanStatus.ACTIVE]

    return StatisticsSnapshot(
        total_organizations=len(store.list_organizations()),
        total_members=sum(1 for m in store.list_members() if m.is_active),
        active_loans=len(active),
        total_profit=to_cents(sum(
            (p.total_profit for p in store.list_profits()), ZERO,
        )),
        active_loan_amount=to_cents(sum(
            (loan.remaining_balance for loan in active), ZERO,
        )),
        pending_applications=sum(
            1 for loan in loans if loan.status == LoanStatus.PENDING
        ),
        overdue_payments=len(overdue_loans(store, as_of)),
    )
