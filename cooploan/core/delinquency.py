"""Delinquency Policy — which active loans have missed a monthly repayment.

Invariants:
    - Only loans with status active or overdue, a start_date and remaining_balance > 0 can be overdue
    - Due months run from the month AFTER the start month through the month BEFORE as_of's month
      (the current month is still open for payment)
    - A due month is missed when no repayment carries that payment_month
    - Pure: reads loans/repayments, never changes a loan's status
"""

from datetime import datetime

from cooploan.core.domain_types import LoanStatus
from cooploan.core.months import month_of, month_range, shift_month
from cooploan.core.repository_protocols import EntityReader
from cooploan.models import Loan, Repayment

_SERVICING_STATUSES = frozenset({LoanStatus.ACTIVE, LoanStatus.OVERDUE})


def due_months(loan: Loan, as_of: datetime) -> list[str]:
    """Months in which the loan should already have received a repayment."""
    if loan.status not in _SERVICING_STATUSES or loan.start_date is None:
        return []
    first_due = shift_month(month_of(loan.start_date), 1)
    last_due = shift_month(month_of(as_of), -1)
    return month_range(first_due, last_due)


def missed_months(
    loan: Loan, repayments: list[Repayment], as_of: datetime,
) -> list[str]:
    """Due months without a matching repayment, oldest first."""
    if loan.remaining_balance <= 0:
        return []
    paid = {r.payment_month for r in repayments if r.loan_id == loan.id}
    return [m for m in due_months(loan, as_of) if m not in paid]


def is_overdue(loan: Loan, repayments: list[Repayment], as_of: datetime) -> bool:
    return bool(missed_months(loan, repayments, as_of))


def overdue_loans(store: EntityReader, as_of: datetime) -> list[Loan]:
    return [
        loan for loan in store.list_loans()
        if is_overdue(loan, store.list_repayments_by_loan(loan.id), as_of)
    ]
