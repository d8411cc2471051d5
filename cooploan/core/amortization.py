"""Loan Accounting — amortization terms and repayment application. Pure, Decimal only.

Invariants:
    - Inputs: amount > 0, term_months >= 1, annual_rate_percent >= 0
    - monthly_payment quantized to cents rounding UP, so
      total_amount = monthly_payment * term_months >= amount
    - apply_repayment never returns a negative balance (floors at 0.00)
      and never raises it (amount must be > 0)

Design Decisions:
    - Decimal with a local 28-digit context for (1 + r) ** n: no binary float drift
    - Zero rate handled separately (the annuity formula divides by zero)
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING, localcontext

from cooploan.core.domain_types import CENT, ZERO, to_cents
from cooploan.core.errors import LoanTermsError

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class LoanTerms:
    """Derived repayment terms for a principal/rate/term triple."""
    monthly_payment: Decimal
    total_amount: Decimal


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Annual percentage rate -> monthly fractional rate."""
    return Decimal(annual_rate_percent) / Decimal(100) / Decimal(MONTHS_PER_YEAR)


def validate_terms(amount: Decimal, annual_rate_percent: Decimal, term_months: int) -> None:
    if amount <= 0:
        raise LoanTermsError("Loan amount must be greater than zero", "amount")
    if term_months < 1:
        raise LoanTermsError("Loan term must be at least one month", "termMonths")
    if annual_rate_percent < 0:
        raise LoanTermsError("Interest rate cannot be negative", "interestRate")


def compute_monthly_payment(
    amount: Decimal, annual_rate_percent: Decimal, term_months: int,
) -> Decimal:
    """Fixed payment for a fully amortizing loan, in cents (rounded up)."""
    validate_terms(amount, annual_rate_percent, term_months)
    with localcontext() as ctx:
        ctx.prec = 28
        rate = monthly_rate(annual_rate_percent)
        if rate == 0:
            payment = Decimal(amount) / Decimal(term_months)
        else:
            growth = (1 + rate) ** term_months
            payment = Decimal(amount) * (rate * growth) / (growth - 1)
        return payment.quantize(CENT, rounding=ROUND_CEILING)


def compute_loan_terms(
    amount: Decimal, annual_rate_percent: Decimal, term_months: int,
) -> LoanTerms:
    """Monthly payment and total repayable amount."""
    payment = compute_monthly_payment(amount, annual_rate_percent, term_months)
    return LoanTerms(
        monthly_payment=payment,
        total_amount=to_cents(payment * term_months),
    )


def validate_repayment_amount(amount: Decimal) -> None:
    if amount <= 0:
        raise LoanTermsError("Repayment amount must be greater than zero", "amount")


def apply_repayment(remaining_balance: Decimal, amount: Decimal) -> Decimal:
    """New balance after a repayment. Overpayment is capped at zero."""
    validate_repayment_amount(amount)
    return to_cents(max(ZERO, Decimal(remaining_balance) - Decimal(amount)))
