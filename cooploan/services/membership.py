"""Membership — member registration, profile updates and login.

Invariants:
    - Passwords are hashed before a Member reaches the store
    - authenticate() raises InvalidCredentialsError for unknown email AND wrong
      password alike (no account enumeration), InactiveAccountError afterwards
    - Login never returns password_hash
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from cooploan.config import Settings
from cooploan.core.domain_types import MemberId
from cooploan.core.errors import (
    InactiveAccountError, InvalidCredentialsError, ResourceNotFoundError,
)
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.security import (
    create_access_token, decode_access_token, hash_password, verify_password,
)
from cooploan.models import Member

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = (
    "name", "email", "organization_id", "is_admin", "can_add_members",
    "is_super_admin", "is_active",
)


@dataclass(frozen=True)
class LoginResult:
    member: Member
    token: str


def build_member(
    name: str, email: str, password: str, organization_id: int | None = None,
    is_admin: bool = False, can_add_members: bool = False,
    is_super_admin: bool = False, is_active: bool = True,
) -> Member:
    return Member(
        name=name,
        email=email.strip().lower(),
        password_hash=hash_password(password),
        organization_id=organization_id,
        is_admin=is_admin,
        can_add_members=can_add_members,
        is_super_admin=is_super_admin,
        is_active=is_active,
    )


def bootstrap_admins(settings: Settings) -> list[Member]:
    """Super admin seeded at startup, if configured."""
    if not (settings.bootstrap_admin_email and settings.bootstrap_admin_password):
        return []
    return [build_member(
        settings.bootstrap_admin_name,
        settings.bootstrap_admin_email,
        settings.bootstrap_admin_password,
        is_admin=True, can_add_members=True, is_super_admin=True,
    )]


def register_member(store: LedgerRepository, **fields) -> Member:
    member = store.add_member(build_member(**fields))
    logger.info(f"Member {member.id} registered", extra={"member_id": member.id})
    return member


def update_member(store: LedgerRepository, member_id: MemberId, changes: dict) -> Member:
    """Apply a partial profile update. A 'password' key is re-hashed.

    None leaves a field unchanged, except organization_id where an explicit
    None detaches the member from its organization.
    """
    member = store.get_member(member_id)
    if member is None:
        raise ResourceNotFoundError("Member", member_id)
    for key in _PROFILE_FIELDS:
        if key not in changes:
            continue
        if changes[key] is not None or key == "organization_id":
            setattr(member, key, changes[key])
    member.email = member.email.strip().lower()
    if changes.get("password"):
        member.password_hash = hash_password(changes["password"])
    return store.save_member(member)


def authenticate(
    store: LedgerRepository, email: str, password: str, settings: Settings,
) -> LoginResult:
    member = store.get_member_by_email(email)
    if member is None or not verify_password(member.password_hash, password):
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError()
    if not member.is_active:
        raise InactiveAccountError()
    token = create_access_token(
        member.id, settings.jwt_secret, settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.token_ttl_minutes),
    )
    logger.info(f"Member {member.id} logged in", extra={"member_id": member.id})
    return LoginResult(member=member, token=token)


def member_from_token(
    store: LedgerRepository, token: str, settings: Settings,
) -> Member:
    """Resolve the active member a bearer token was issued for."""
    member_id = decode_access_token(token, settings.jwt_secret, settings.jwt_algorithm)
    member = store.get_member(member_id)
    if member is None:
        raise InvalidCredentialsError()
    if not member.is_active:
        raise InactiveAccountError()
    return member
