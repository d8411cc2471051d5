"""Loan Ledger — loan origination, status changes and repayment posting.

Invariants:
    - Derived fields (monthly_payment, total_amount) come only from core/amortization.py
    - A loan starts pending with remaining_balance = amount and no start_date
    - record_repayment is read-check-write on one loan, with no await in between
    - Status changes pass core/loan_lifecycle.check_transition first
    - Terms may be edited only while the loan is pending

Design Decisions:
    - Functions, not a class: the store is the only dependency and is passed explicitly
    - Repayment is stored before the balance is written back, so a duplicate month
      fails without touching the loan
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from cooploan.core.amortization import (
    apply_repayment, compute_loan_terms, validate_repayment_amount,
)
from cooploan.core.domain_types import LoanId, LoanStatus, MemberId
from cooploan.core.errors import InvalidLoanStateError, ResourceNotFoundError
from cooploan.core.loan_lifecycle import check_transition
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.models import Loan, Repayment

logger = logging.getLogger(__name__)


def get_loan_or_404(store: LedgerRepository, loan_id: LoanId) -> Loan:
    loan = store.get_loan(loan_id)
    if loan is None:
        raise ResourceNotFoundError("Loan", loan_id)
    return loan


def create_loan(
    store: LedgerRepository,
    member_id: MemberId,
    amount: Decimal,
    interest_rate: Decimal,
    term_months: int,
    purpose: str,
) -> Loan:
    """Originate a pending loan with computed repayment terms."""
    terms = compute_loan_terms(amount, interest_rate, term_months)
    loan = store.add_loan(Loan(
        member_id=member_id,
        amount=amount,
        interest_rate=interest_rate,
        term_months=term_months,
        monthly_payment=terms.monthly_payment,
        total_amount=terms.total_amount,
        remaining_balance=amount,
        purpose=purpose,
    ))
    logger.info(
        f"Loan {loan.id} created for member {member_id}",
        extra={"loan_id": loan.id, "member_id": member_id},
    )
    return loan


def update_loan_terms(
    store: LedgerRepository,
    loan_id: LoanId,
    amount: Decimal | None = None,
    interest_rate: Decimal | None = None,
    term_months: int | None = None,
    purpose: str | None = None,
) -> Loan:
    """Edit a pending application. Derived fields are recomputed."""
    loan = get_loan_or_404(store, loan_id)
    if loan.status != LoanStatus.PENDING:
        raise InvalidLoanStateError(loan_id, loan.status.value, "edit")

    if amount is not None:
        loan.amount = amount
    if interest_rate is not None:
        loan.interest_rate = interest_rate
    if term_months is not None:
        loan.term_months = term_months
    if purpose is not None:
        loan.purpose = purpose

    terms = compute_loan_terms(loan.amount, loan.interest_rate, loan.term_months)
    loan.monthly_payment = terms.monthly_payment
    loan.total_amount = terms.total_amount
    loan.remaining_balance = loan.amount
    return store.save_loan(loan)


def update_loan_status(
    store: LedgerRepository, loan_id: LoanId, status: LoanStatus,
    now: datetime | None = None,
) -> Loan:
    """Approve, reject or activate a loan. Activation stamps start_date."""
    loan = get_loan_or_404(store, loan_id)
    target = LoanStatus(status)
    check_transition(loan_id, loan.status, target)

    loan.status = target
    if target == LoanStatus.ACTIVE:
        loan.start_date = now or datetime.now(timezone.utc)
    saved = store.save_loan(loan)
    logger.info(
        f"Loan {loan_id} moved to {target.value}",
        extra={"loan_id": loan_id, "status": target.value},
    )
    return saved


def record_repayment(
    store: LedgerRepository, loan_id: LoanId, amount: Decimal, payment_month: str,
) -> Repayment:
    """Post a monthly repayment and reduce the loan balance (floored at zero)."""
    validate_repayment_amount(amount)
    loan = get_loan_or_404(store, loan_id)
    repayment = store.add_repayment(Repayment(
        loan_id=loan_id, amount=amount, payment_month=payment_month,
    ))
    loan.remaining_balance = apply_repayment(loan.remaining_balance, amount)
    store.save_loan(loan)
    logger.info(
        f"Repayment {repayment.id} posted to loan {loan_id}",
        extra={
            "loan_id": loan_id, "payment_month": payment_month,
        },
    )
    return repayment


def delete_loan(store: LedgerRepository, loan_id: LoanId) -> None:
    store.delete_loan(loan_id)
    logger.info(f"Loan {loan_id} deleted", extra={"loan_id": loan_id})
