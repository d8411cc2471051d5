"""Profit Schemas — yearly record plus derived split amounts."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from cooploan.schemas.common import ApiModel, NonNegativeMoney, Percent


class ProfitCreate(ApiModel):
    total_profit: NonNegativeMoney
    fixed_percent: Percent
    shared_percent_per_member: Percent
    year: int = Field(ge=1900, le=9999)


class ProfitResponse(ApiModel):
    id: int
    total_profit: Decimal
    fixed_percent: Decimal
    shared_percent_per_member: Decimal
    year: int
    calculation_date: datetime
    retained_amount: Decimal
    member_share_amount: Decimal


class MemberShare(ApiModel):
    member_id: int
    member_name: str
    amount: Decimal


class ProfitDistributionResponse(ApiModel):
    year: int
    total_profit: Decimal
    retained_amount: Decimal
    member_share_amount: Decimal
    distributed_amount: Decimal
    undistributed_amount: Decimal
    shares: list[MemberShare]
