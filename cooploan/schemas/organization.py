"""Organization Schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from cooploan.schemas.common import ApiModel, EntityId, strip_required


class OrganizationCreate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    created_by: EntityId

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")


class OrganizationUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    created_by: EntityId | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_required(v, "name")


class OrganizationResponse(ApiModel):
    id: int
    name: str
    created_by: int
    created_at: datetime
