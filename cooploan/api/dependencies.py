"""Route Dependencies — store, clock, settings and bearer-token member resolution.

Invariants:
    - get_store is the only way routes reach the entity store (overridden in tests)
    - get_clock is the only source of "now" for time-dependent reads (statistics, trends)
    - get_current_member raises InvalidTokenError (401) when the header is missing or malformed
"""

from datetime import datetime, timezone

from fastapi import Depends, Header

from cooploan.config import Settings, get_settings
from cooploan.core.errors import InvalidTokenError
from cooploan.infrastructure.memory_store import InMemoryStore, get_store
from cooploan.models import Member
from cooploan.services.membership import member_from_token


def get_clock() -> datetime:
    return datetime.now(timezone.utc)


def get_current_member(
    authorization: str | None = Header(None),
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Member:
    if not authorization:
        raise InvalidTokenError("Missing bearer token")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidTokenError("Malformed authorization header")
    return member_from_token(store, token.strip(), settings)
