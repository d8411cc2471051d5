"""Repayment Schemas."""

from datetime import datetime
from decimal import Decimal

from cooploan.schemas.common import ApiModel, EntityId, MonthToken, PositiveMoney
from cooploan.schemas.loan import LoanWithMemberResponse


class RepaymentCreate(ApiModel):
    loan_id: EntityId
    amount: PositiveMoney
    payment_month: MonthToken


class RepaymentResponse(ApiModel):
    id: int
    loan_id: int
    amount: Decimal
    payment_month: str
    paid_at: datetime


class RepaymentWithLoanResponse(RepaymentResponse):
    loan: LoanWithMemberResponse
