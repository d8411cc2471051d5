"""Reports — portfolio summary, per-organization breakdown, monthly trends."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from cooploan.api.dependencies import get_clock
from cooploan.core import reports
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.schemas.statistics import (
    MonthlyTrendRow, OrganizationBreakdownRow, PortfolioSummaryResponse,
)

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/summary", response_model=PortfolioSummaryResponse)
async def get_portfolio_summary(store: LedgerRepository = Depends(get_store)):
    return reports.portfolio_summary(store)


@router.get("/organizations", response_model=list[OrganizationBreakdownRow])
async def get_organization_breakdown(store: LedgerRepository = Depends(get_store)):
    return reports.organization_breakdown(store)


@router.get("/monthly-trends", response_model=list[MonthlyTrendRow])
async def get_monthly_trends(
    months: int = Query(6, ge=1, le=24),
    store: LedgerRepository = Depends(get_store),
    now: datetime = Depends(get_clock),
):
    return reports.monthly_trends(store, now, months)
