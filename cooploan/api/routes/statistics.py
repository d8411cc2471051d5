"""Statistics — dashboard counters."""

from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter, Depends

from cooploan.api.dependencies import get_clock
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.core.statistics import compute_statistics
from cooploan.infrastructure.memory_store import get_store
from cooploan.schemas.statistics import StatisticsResponse

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
async def get_statistics(
    store: LedgerRepository = Depends(get_store),
    now: datetime = Depends(get_clock),
):
    return asdict(compute_statistics(store, now))
