"""Member — a cooperative participant and API user.

Invariants:
    - email is unique across the store
    - password_hash is a werkzeug salted hash, never plaintext
    - organization_id is None or references an existing Organization
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Member:
    name: str
    email: str
    password_hash: str
    organization_id: int | None = None
    is_admin: bool = False
    can_add_members: bool = False
    is_super_admin: bool = False
    is_active: bool = True
    id: int = 0
    join_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
