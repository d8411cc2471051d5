"""Membership — registration, profile updates, login and token resolution."""

from datetime import timedelta

import pytest

from cooploan.config import Settings
from cooploan.core.errors import (
    DuplicateEmailError, InactiveAccountError, InvalidCredentialsError,
    InvalidTokenError,
)
from cooploan.infrastructure.security import create_access_token, verify_password
from cooploan.services import membership
from tests.factories import add_organization

SETTINGS = Settings(jwt_secret="unit-test-secret-that-is-long-enough-xx")


def _register(store, email="ada@example.com", password="password123", **extra):
    return membership.register_member(
        store, name="Ada", email=email, password=password, **extra,
    )


def test_register_hashes_password_and_normalizes_email(store):
    member = _register(store, email="  Ada@Example.COM ")
    assert member.email == "ada@example.com"
    assert member.password_hash != "password123"
    assert verify_password(member.password_hash, "password123")


def test_register_duplicate_email_rejected(store):
    _register(store)
    with pytest.raises(DuplicateEmailError):
        _register(store, email="ADA@example.com")


def test_update_member_partial(store):
    org = add_organization(store)
    member = _register(store)
    updated = membership.update_member(
        store, member.id, {"name": "Ada L.", "organization_id": org.id, "is_admin": None},
    )
    assert updated.name == "Ada L."
    assert updated.organization_id == org.id
    assert updated.is_admin is False


def test_update_member_explicit_null_detaches_organization(store):
    org = add_organization(store)
    member = _register(store, organization_id=org.id)
    updated = membership.update_member(store, member.id, {"organization_id": None})
    assert updated.organization_id is None


def test_update_member_rehashes_password(store):
    member = _register(store)
    membership.update_member(store, member.id, {"password": "new-password-1"})
    stored = store.get_member(member.id)
    assert verify_password(stored.password_hash, "new-password-1")
    assert not verify_password(stored.password_hash, "password123")


def test_authenticate_returns_token_for_member(store):
    member = _register(store)
    result = membership.authenticate(store, "ADA@example.com", "password123", SETTINGS)
    assert result.member.id == member.id
    assert membership.member_from_token(store, result.token, SETTINGS).id == member.id


def test_authenticate_wrong_password_and_unknown_email_look_alike(store):
    _register(store)
    with pytest.raises(InvalidCredentialsError):
        membership.authenticate(store, "ada@example.com", "nope-nope", SETTINGS)
    with pytest.raises(InvalidCredentialsError):
        membership.authenticate(store, "ghost@example.com", "password123", SETTINGS)


def test_authenticate_inactive_member(store):
    _register(store, is_active=False)
    with pytest.raises(InactiveAccountError):
        membership.authenticate(store, "ada@example.com", "password123", SETTINGS)


def test_token_for_deleted_member_rejected(store):
    member = _register(store)
    token = create_access_token(member.id, SETTINGS.jwt_secret, ttl=timedelta(minutes=5))
    store.delete_member(member.id)
    with pytest.raises(InvalidCredentialsError):
        membership.member_from_token(store, token, SETTINGS)


def test_token_signed_elsewhere_rejected(store):
    member = _register(store)
    token = create_access_token(member.id, "a-different-secret-of-sufficient-len")
    with pytest.raises(InvalidTokenError):
        membership.member_from_token(store, token, SETTINGS)


def test_bootstrap_admins_requires_email_and_password():
    assert membership.bootstrap_admins(Settings(bootstrap_admin_email="root@example.com")) == []
    admins = membership.bootstrap_admins(Settings(
        bootstrap_admin_email="Root@Example.com", bootstrap_admin_password="rootpass123",
    ))
    assert len(admins) == 1
    assert admins[0].is_super_admin
    assert admins[0].email == "root@example.com"
