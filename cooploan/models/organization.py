"""Organization — a lending group members belong to."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Organization:
    name: str
    created_by: int
    id: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
