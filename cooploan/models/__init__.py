"""Entity Models — plain dataclasses for every stored entity.

Invariants:
    - id is assigned by the store on insert (0 until then)
    - Money fields are Decimal; timestamps are timezone-aware UTC datetimes
    - Models hold no behavior beyond field defaults (accounting lives in core/)

Design Decisions:
    - One file per entity for locality
"""

from cooploan.models.organization import Organization  # noqa: F401
from cooploan.models.member import Member  # noqa: F401
from cooploan.models.loan import Loan  # noqa: F401
from cooploan.models.repayment import Repayment  # noqa: F401
from cooploan.models.contribution import MonthlyContribution  # noqa: F401
from cooploan.models.profit import Profit  # noqa: F401
