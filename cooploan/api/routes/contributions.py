"""Monthly Contributions — member savings deposits, one per (memberId, month)."""

import logging

from fastapi import APIRouter, Depends, Query, status

from cooploan.core.months import MONTH_PATTERN
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.models import MonthlyContribution
from cooploan.schemas.contribution import ContributionCreate, ContributionResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contributions", tags=["contributions"])


@router.get("", response_model=list[ContributionResponse])
async def list_contributions(
    member_id: int | None = Query(None, alias="memberId"),
    month: str | None = Query(None, pattern=MONTH_PATTERN),
    store: LedgerRepository = Depends(get_store),
):
    if member_id is not None:
        return store.list_contributions_by_member(member_id)
    if month is not None:
        return store.list_contributions_by_month(month)
    return store.list_contributions()


@router.post(
    "", response_model=ContributionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_contribution(
    body: ContributionCreate, store: LedgerRepository = Depends(get_store),
):
    contribution = store.add_contribution(MonthlyContribution(
        member_id=body.member_id, month=body.month, amount_paid=body.amount_paid,
    ))
    logger.info(
        f"Contribution {contribution.id} recorded for {body.month}",
        extra={"member_id": body.member_id},
    )
    return contribution
