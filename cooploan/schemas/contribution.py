"""Monthly Contribution Schemas."""

from datetime import datetime
from decimal import Decimal

from cooploan.schemas.common import ApiModel, EntityId, MonthToken, PositiveMoney


class ContributionCreate(ApiModel):
    member_id: EntityId
    month: MonthToken
    amount_paid: PositiveMoney


class ContributionResponse(ApiModel):
    id: int
    member_id: int
    month: str
    amount_paid: Decimal
    paid_at: datetime
