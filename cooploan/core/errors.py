"""Error Hierarchy — typed, categorized exceptions for all cooperative ledger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400/401/404; only unexpected faults surface as 500
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CoopLoanError base: one global handler catches all
    - Duplicate-month repayments are CONFLICT category but HTTP 400 (API contract)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_type: str | None = None
    entity_id: int | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class CoopLoanError(Exception):
    """Base exception for all cooperative ledger errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity_type": self.context.entity_type,
                    "entity_id": self.context.entity_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Validation & Business Rules (400) ──────────────────────────

class LoanTermsError(CoopLoanError):
    """Loan principal, rate or term outside the accepted domain."""
    def __init__(self, message: str, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field_name = field_name


class InvalidStatusTransitionError(CoopLoanError):
    """Requested loan status is not reachable from the current one."""
    def __init__(
        self, loan_id: int, current: str, target: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity_type="Loan", entity_id=loan_id)
        super().__init__(
            f"Loan {loan_id} cannot move from '{current}' to '{target}'",
            "INVALID_STATUS_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.current = current
        self.target = target


class InvalidLoanStateError(CoopLoanError):
    """Operation requires the loan to be in another status."""
    def __init__(
        self, loan_id: int, status: str, operation: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity_type="Loan", entity_id=loan_id)
        super().__init__(
            f"Cannot {operation} loan {loan_id} while it is '{status}'",
            "INVALID_LOAN_STATE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Conflicts (400 per API contract) ───────────────────────────

class DuplicatePaymentError(CoopLoanError):
    """A repayment already exists for this loan and month."""
    def __init__(self, loan_id: int, payment_month: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(entity_type="Loan", entity_id=loan_id)
        super().__init__(
            f"Repayment for {payment_month} already exists on loan {loan_id}",
            "DUPLICATE_PAYMENT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.payment_month = payment_month


class DuplicateContributionError(CoopLoanError):
    """A contribution already exists for this member and month."""
    def __init__(self, member_id: int, month: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(entity_type="Member", entity_id=member_id)
        super().__init__(
            f"Contribution for {month} already recorded for member {member_id}",
            "DUPLICATE_CONTRIBUTION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )


class DuplicateProfitYearError(CoopLoanError):
    """A profit record already exists for this year."""
    def __init__(self, year: int, context: ErrorContext | None = None):
        super().__init__(
            f"Profit for {year} has already been calculated",
            "DUPLICATE_PROFIT_YEAR", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


class DuplicateEmailError(CoopLoanError):
    """Member email is already registered."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(field_name="email")
        super().__init__(
            f"Email '{email}' is already registered",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )


class EntityInUseError(CoopLoanError):
    """Delete refused: other entities still reference this one."""
    def __init__(
        self, resource_type: str, resource_id: int, referenced_by: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity_type=resource_type, entity_id=resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' is still referenced by {referenced_by}",
            "ENTITY_IN_USE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.referenced_by = referenced_by


# ─── Lookup (404) ───────────────────────────────────────────────

class ResourceNotFoundError(CoopLoanError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity_type=resource_type)
        if isinstance(resource_id, int):
            ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Authentication (401) ───────────────────────────────────────

class InvalidCredentialsError(CoopLoanError):
    """Unknown email or wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class InactiveAccountError(CoopLoanError):
    """Credentials valid but the member is deactivated."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Account is inactive", "ACCOUNT_INACTIVE",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(CoopLoanError):
    """Bearer token missing, malformed, expired or not signed by us."""
    def __init__(self, reason: str = "Invalid or expired token", context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_TOKEN",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )
