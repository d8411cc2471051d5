"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Entity ids are positive ints assigned by the store, never reused
    - All money values are Decimal quantized to cents (CENT), never float
    - Loan statuses encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrganizationId = NewType("OrganizationId", int)
MemberId = NewType("MemberId", int)
LoanId = NewType("LoanId", int)
RepaymentId = NewType("RepaymentId", int)


# ─── Value Types ─────────────────────────────────────────────────

MonthToken = NewType("MonthToken", str)  # "YYYY-MM"

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_cents(value: Decimal) -> Decimal:
    """Quantize a money value to cents (half-up)."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


# ─── Enums ───────────────────────────────────────────────────────

class LoanStatus(str, Enum):
    """Loan lifecycle states."""
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    REJECTED = "rejected"


# Statuses the status endpoint may set; completed/overdue are never set by a caller
STATUS_UPDATE_TARGETS: frozenset[LoanStatus] = frozenset({
    LoanStatus.APPROVED, LoanStatus.REJECTED, LoanStatus.ACTIVE,
})

TERMINAL_STATUSES: frozenset[LoanStatus] = frozenset({
    LoanStatus.COMPLETED, LoanStatus.REJECTED,
})
