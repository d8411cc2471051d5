"""Repayment — one monthly payment against a loan. Unique per (loan_id, payment_month)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass
class Repayment:
    loan_id: int
    amount: Decimal
    payment_month: str
    id: int = 0
    paid_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
