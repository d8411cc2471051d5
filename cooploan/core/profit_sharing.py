"""Profit Sharing — retained and per-member amounts of a yearly profit record.

Invariants:
    - retained_amount = total_profit * fixed_percent / 100
    - member_share_amount = total_profit * shared_percent_per_member / 100
    - Results quantized to cents; nothing here is persisted
    - Only active members receive a share
"""

from decimal import Decimal

from cooploan.core.domain_types import ZERO, to_cents
from cooploan.models import Member, Profit


def percent_of(total: Decimal, percent: Decimal) -> Decimal:
    return to_cents(Decimal(total) * Decimal(percent) / Decimal(100))


def retained_amount(profit: Profit) -> Decimal:
    return percent_of(profit.total_profit, profit.fixed_percent)


def member_share_amount(profit: Profit) -> Decimal:
    return percent_of(profit.total_profit, profit.shared_percent_per_member)


def profit_view(profit: Profit) -> dict:
    """Profit fields plus the derived split amounts."""
    return {
        "id": profit.id,
        "total_profit": profit.total_profit,
        "fixed_percent": profit.fixed_percent,
        "shared_percent_per_member": profit.shared_percent_per_member,
        "year": profit.year,
        "calculation_date": profit.calculation_date,
        "retained_amount": retained_amount(profit),
        "member_share_amount": member_share_amount(profit),
    }


def distribute_profit(profit: Profit, members: list[Member]) -> dict:
    """Per-member payout list for a profit record."""
    share = member_share_amount(profit)
    recipients = [m for m in members if m.is_active]
    distributed = to_cents(share * len(recipients))
    return {
        "year": profit.year,
        "total_profit": profit.total_profit,
        "retained_amount": retained_amount(profit),
        "member_share_amount": share,
        "distributed_amount": distributed,
        "undistributed_amount": max(
            ZERO, to_cents(profit.total_profit - retained_amount(profit) - distributed),
        ),
        "shares": [
            {"member_id": m.id, "member_name": m.name, "amount": share}
            for m in recipients
        ],
    }
