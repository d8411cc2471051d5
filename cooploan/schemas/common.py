"""Shared schema building blocks — camelCase base model and constrained money/month types."""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cooploan.core.domain_types import to_cents
from cooploan.core.months import MONTH_PATTERN


class ApiModel(BaseModel):
    """Base for all API schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


PositiveMoney = Annotated[
    Decimal,
    Field(gt=0, max_digits=12, decimal_places=2),
    AfterValidator(to_cents),
]

NonNegativeMoney = Annotated[
    Decimal,
    Field(ge=0, max_digits=12, decimal_places=2),
    AfterValidator(to_cents),
]

Percent = Annotated[Decimal, Field(ge=0, le=100, max_digits=5, decimal_places=2)]

InterestRate = Annotated[Decimal, Field(ge=0, max_digits=5, decimal_places=2)]

MonthToken = Annotated[str, Field(pattern=MONTH_PATTERN)]

EntityId = Annotated[int, Field(ge=1)]


def strip_required(value: str | None, field: str) -> str | None:
    """Trim a text field, rejecting blank input. None passes through (update schemas)."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError(f"{field} cannot be empty or whitespace")
    return value
