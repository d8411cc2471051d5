"""Month Tokens — "YYYY-MM" parsing and calendar arithmetic.

Invariants:
    - A valid token is exactly 4 digit year, dash, 2 digit month 01-12
    - Ranges are inclusive and ordered oldest first
"""

import re
from datetime import datetime

from cooploan.core.domain_types import MonthToken

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
_MONTH_RE = re.compile(MONTH_PATTERN)


def is_month_token(value: str) -> bool:
    return bool(_MONTH_RE.match(value))


def parse_month(token: str) -> tuple[int, int]:
    """Split a month token into (year, month). Raises ValueError if malformed."""
    if not is_month_token(token):
        raise ValueError(f"Invalid month token '{token}', expected YYYY-MM")
    year, month = token.split("-")
    return int(year), int(month)


def format_month(year: int, month: int) -> MonthToken:
    return MonthToken(f"{year:04d}-{month:02d}")


def month_of(moment: datetime) -> MonthToken:
    """Month token containing the given datetime."""
    return format_month(moment.year, moment.month)


def shift_month(token: str, delta: int) -> MonthToken:
    """Move a month token forward (delta > 0) or backward (delta < 0)."""
    year, month = parse_month(token)
    index = year * 12 + (month - 1) + delta
    return format_month(index // 12, index % 12 + 1)


def month_range(first: str, last: str) -> list[MonthToken]:
    """Inclusive list of month tokens from first to last. Empty if first > last."""
    months: list[MonthToken] = []
    current = MonthToken(first)
    # Zero-padded tokens compare correctly as strings
    while current <= last:
        months.append(current)
        current = shift_month(current, 1)
    return months


def last_months(as_of: datetime, count: int) -> list[MonthToken]:
    """The `count` months ending with the month of `as_of`, oldest first."""
    end = month_of(as_of)
    return month_range(shift_month(end, -(count - 1)), end)
