"""Profits — yearly profit records (one per year) and their member distribution."""

import logging

from fastapi import APIRouter, Depends, Query, status

from cooploan.core.errors import ResourceNotFoundError
from cooploan.core.profit_sharing import distribute_profit, profit_view
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.models import Profit
from cooploan.schemas.profit import (
    ProfitCreate, ProfitDistributionResponse, ProfitResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/profits", tags=["profits"])


@router.get("", response_model=list[ProfitResponse])
async def list_profits(
    year: int | None = Query(None),
    store: LedgerRepository = Depends(get_store),
):
    if year is not None:
        profit = store.get_profit_by_year(year)
        return [profit_view(profit)] if profit else []
    return [profit_view(p) for p in store.list_profits()]


@router.post(
    "", response_model=ProfitResponse, status_code=status.HTTP_201_CREATED,
)
async def create_profit(body: ProfitCreate, store: LedgerRepository = Depends(get_store)):
    profit = store.add_profit(Profit(
        total_profit=body.total_profit,
        fixed_percent=body.fixed_percent,
        shared_percent_per_member=body.shared_percent_per_member,
        year=body.year,
    ))
    logger.info(f"Profit for {profit.year} recorded")
    return profit_view(profit)


@router.get("/{year}/distribution", response_model=ProfitDistributionResponse)
async def get_profit_distribution(
    year: int, store: LedgerRepository = Depends(get_store),
):
    profit = store.get_profit_by_year(year)
    if profit is None:
        raise ResourceNotFoundError("Profit", year)
    return distribute_profit(profit, store.list_members())
