"""Repayments — monthly loan payments, one per (loanId, paymentMonth).

Invariants:
    - POST returns 201, or 400 DUPLICATE_PAYMENT when the month is already paid
    - POST for an unknown loan → 404
    - GET list filters by loanId, else memberId, else returns all; rows embed loan + member
"""

from fastapi import APIRouter, Depends, Query, status

from cooploan.core.errors import ResourceNotFoundError
from cooploan.core.joins import list_repayments_with_loan, repayment_with_loan
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.schemas.repayment import (
    RepaymentCreate, RepaymentResponse, RepaymentWithLoanResponse,
)
from cooploan.services import ledger

router = APIRouter(prefix="/api/repayments", tags=["repayments"])


@router.get("", response_model=list[RepaymentWithLoanResponse])
async def list_repayments(
    loan_id: int | None = Query(None, alias="loanId"),
    member_id: int | None = Query(None, alias="memberId"),
    store: LedgerRepository = Depends(get_store),
):
    if loan_id is not None:
        repayments = store.list_repayments_by_loan(loan_id)
    elif member_id is not None:
        repayments = store.list_repayments_by_member(member_id)
    else:
        repayments = store.list_repayments()
    return list_repayments_with_loan(store, repayments)


@router.get("/{repayment_id}", response_model=RepaymentWithLoanResponse)
async def get_repayment(
    repayment_id: int, store: LedgerRepository = Depends(get_store),
):
    repayment = store.get_repayment(repayment_id)
    view = repayment_with_loan(store, repayment) if repayment else None
    if view is None:
        raise ResourceNotFoundError("Repayment", repayment_id)
    return view


@router.post(
    "", response_model=RepaymentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_repayment(
    body: RepaymentCreate, store: LedgerRepository = Depends(get_store),
):
    return ledger.record_repayment(
        store, body.loan_id, body.amount, body.payment_month,
    )
