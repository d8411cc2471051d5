"""Member Schemas — credentials accepted on input, never echoed back.

Invariants:
    - email is trimmed and lower-cased; must contain a single '@' with a dotted domain
    - password: 8-128 chars, write-only
    - MemberResponse has no password / password_hash field
"""

import re
from datetime import datetime

from pydantic import Field, field_validator

from cooploan.schemas.common import ApiModel, EntityId, strip_required
from cooploan.schemas.organization import OrganizationResponse

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class MemberCreate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(max_length=254)
    password: str = Field(min_length=8, max_length=128)
    organization_id: EntityId | None = None
    is_admin: bool = False
    can_add_members: bool = False
    is_super_admin: bool = False
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class MemberUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, max_length=254)
    password: str | None = Field(None, min_length=8, max_length=128)
    organization_id: EntityId | None = None
    is_admin: bool | None = None
    can_add_members: bool | None = None
    is_super_admin: bool | None = None
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_required(v, "name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return _normalize_email(v) if v is not None else None


class MemberResponse(ApiModel):
    id: int
    name: str
    email: str
    organization_id: int | None = None
    is_admin: bool
    can_add_members: bool
    is_super_admin: bool
    is_active: bool
    join_date: datetime
    organization: OrganizationResponse | None = None


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not re.match(EMAIL_PATTERN, value):
        raise ValueError("email must be a valid address")
    return value
