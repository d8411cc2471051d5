"""Loan Lifecycle — legal status transitions for caller-initiated updates.

Invariants:
    - pending  -> approved | rejected | active
    - approved -> active | rejected
    - active, overdue, completed, rejected accept no caller-initiated transition
    - check_transition is PURE: raises on an illegal move, never mutates the loan

Design Decisions:
    - completed/overdue are never reachable through the status endpoint
      (STATUS_UPDATE_TARGETS); they belong to ledger-driven updates
"""

from cooploan.core.domain_types import (
    LoanId, LoanStatus, STATUS_UPDATE_TARGETS, TERMINAL_STATUSES,
)
from cooploan.core.errors import InvalidStatusTransitionError

ALLOWED_TRANSITIONS: dict[LoanStatus, frozenset[LoanStatus]] = {
    LoanStatus.PENDING: frozenset({
        LoanStatus.APPROVED, LoanStatus.REJECTED, LoanStatus.ACTIVE,
    }),
    LoanStatus.APPROVED: frozenset({LoanStatus.ACTIVE, LoanStatus.REJECTED}),
    LoanStatus.ACTIVE: frozenset(),
    LoanStatus.OVERDUE: frozenset(),
    **{status: frozenset() for status in TERMINAL_STATUSES},
}


def can_transition(current: LoanStatus, target: LoanStatus) -> bool:
    return (
        target in STATUS_UPDATE_TARGETS
        and target in ALLOWED_TRANSITIONS.get(current, frozenset())
    )


def check_transition(loan_id: LoanId, current: LoanStatus, target: LoanStatus) -> None:
    """Raise InvalidStatusTransitionError unless current -> target is allowed."""
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(
            loan_id, LoanStatus(current).value, LoanStatus(target).value,
        )
