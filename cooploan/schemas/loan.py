"""Loan Schemas — origination input, status changes and loan read models.

Invariants:
    - LoanCreate: amount > 0, interestRate 0-999.99, termMonths 1-600, purpose non-empty
    - LoanStatusUpdate.status restricted to approved | rejected | active
    - Derived fields (monthlyPayment, totalAmount, remainingBalance) are response-only
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator

from cooploan.core.domain_types import LoanStatus
from cooploan.schemas.common import (
    ApiModel, EntityId, InterestRate, PositiveMoney, strip_required,
)
from cooploan.schemas.member import MemberResponse


class LoanCreate(ApiModel):
    member_id: EntityId
    amount: PositiveMoney
    interest_rate: InterestRate
    term_months: int = Field(ge=1, le=600)
    purpose: str = Field(min_length=1, max_length=1000)

    @field_validator("purpose")
    @classmethod
    def strip_purpose(cls, v: str) -> str:
        return strip_required(v, "purpose")


class LoanUpdate(ApiModel):
    """Edits to a pending application. Omitted fields keep their value."""
    amount: PositiveMoney | None = None
    interest_rate: InterestRate | None = None
    term_months: int | None = Field(None, ge=1, le=600)
    purpose: str | None = Field(None, min_length=1, max_length=1000)

    @field_validator("purpose")
    @classmethod
    def strip_purpose(cls, v: str | None) -> str | None:
        return strip_required(v, "purpose")


class LoanStatusUpdate(ApiModel):
    status: Literal["approved", "rejected", "active"]


class LoanResponse(ApiModel):
    id: int
    member_id: int
    amount: Decimal
    interest_rate: Decimal
    term_months: int
    monthly_payment: Decimal
    total_amount: Decimal
    remaining_balance: Decimal
    purpose: str
    status: LoanStatus
    start_date: datetime | None = None
    created_at: datetime


class LoanWithMemberResponse(LoanResponse):
    member: MemberResponse
