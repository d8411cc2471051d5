"""Loan — an amortizing loan owned by a member.

Invariants:
    - 0 <= remaining_balance <= total_amount
    - monthly_payment and total_amount are derived at creation (core/amortization.py)
    - start_date is set only once the loan becomes active
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from cooploan.core.domain_types import LoanStatus


@dataclass
class Loan:
    member_id: int
    amount: Decimal
    interest_rate: Decimal
    term_months: int
    monthly_payment: Decimal
    total_amount: Decimal
    remaining_balance: Decimal
    purpose: str
    status: LoanStatus = LoanStatus.PENDING
    start_date: datetime | None = None
    id: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
