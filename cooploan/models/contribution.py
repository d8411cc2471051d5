"""Monthly Contribution — a member's savings deposit for one month. Unique per (member_id, month)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass
class MonthlyContribution:
    member_id: int
    month: str
    amount_paid: Decimal
    id: int = 0
    paid_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
