"""Loans — origination, listing with embedded member, term edits, status changes.

Invariants:
    - POST returns the full Loan with derived monthlyPayment/totalAmount (201)
    - GET list filters by memberId, else organizationId, else returns all
    - GET /{id} returns 404 when the loan or its member is missing
    - PATCH /{id}/status accepts approved | rejected | active only (400 otherwise)
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status

from cooploan.api.dependencies import get_clock
from cooploan.core.errors import ResourceNotFoundError
from cooploan.core.joins import list_loans_with_member, loan_with_member
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.schemas.loan import (
    LoanCreate, LoanResponse, LoanStatusUpdate, LoanUpdate, LoanWithMemberResponse,
)
from cooploan.services import ledger

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.get("", response_model=list[LoanWithMemberResponse])
async def list_loans(
    member_id: int | None = Query(None, alias="memberId"),
    organization_id: int | None = Query(None, alias="organizationId"),
    store: LedgerRepository = Depends(get_store),
):
    if member_id is not None:
        loans = store.list_loans_by_member(member_id)
    elif organization_id is not None:
        loans = store.list_loans_by_organization(organization_id)
    else:
        loans = store.list_loans()
    return list_loans_with_member(store, loans)


@router.get("/{loan_id}", response_model=LoanWithMemberResponse)
async def get_loan(loan_id: int, store: LedgerRepository = Depends(get_store)):
    view = loan_with_member(store, ledger.get_loan_or_404(store, loan_id))
    if view is None:
        raise ResourceNotFoundError("Loan", loan_id)
    return view


@router.post(
    "", response_model=LoanResponse, status_code=status.HTTP_201_CREATED,
)
async def create_loan(body: LoanCreate, store: LedgerRepository = Depends(get_store)):
    return ledger.create_loan(
        store,
        member_id=body.member_id,
        amount=body.amount,
        interest_rate=body.interest_rate,
        term_months=body.term_months,
        purpose=body.purpose,
    )


@router.put("/{loan_id}", response_model=LoanResponse)
async def update_loan(
    loan_id: int, body: LoanUpdate, store: LedgerRepository = Depends(get_store),
):
    return ledger.update_loan_terms(
        store, loan_id, **body.model_dump(exclude_unset=True),
    )


@router.patch("/{loan_id}/status", response_model=LoanResponse)
async def update_loan_status(
    loan_id: int, body: LoanStatusUpdate,
    store: LedgerRepository = Depends(get_store),
    now: datetime = Depends(get_clock),
):
    return ledger.update_loan_status(store, loan_id, body.status, now)


@router.delete("/{loan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_loan(loan_id: int, store: LedgerRepository = Depends(get_store)):
    ledger.delete_loan(store, loan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
