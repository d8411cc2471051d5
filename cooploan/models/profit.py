"""Profit — yearly surplus and how it is split. One record per year."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass
class Profit:
    total_profit: Decimal
    fixed_percent: Decimal
    shared_percent_per_member: Decimal
    year: int
    id: int = 0
    calculation_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
