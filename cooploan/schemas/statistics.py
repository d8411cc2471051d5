"""Statistics & Report Schemas — dashboard counters and report rows."""

from decimal import Decimal

from cooploan.schemas.common import ApiModel


class StatisticsResponse(ApiModel):
    total_organizations: int
    total_members: int
    active_loans: int
    total_profit: Decimal
    active_loan_amount: Decimal
    pending_applications: int
    overdue_payments: int


class PortfolioSummaryResponse(ApiModel):
    total_organizations: int
    total_members: int
    active_members: int
    total_loans: int
    active_loans: int
    total_loan_amount: Decimal
    active_loan_amount: Decimal
    total_repayments: int
    total_repayment_amount: Decimal
    total_contributions: int
    total_contribution_amount: Decimal
    average_loan_amount: Decimal
    repayment_rate: Decimal


class OrganizationBreakdownRow(ApiModel):
    organization_id: int
    organization_name: str
    member_count: int
    loan_count: int
    total_loan_amount: Decimal
    repayment_count: int
    total_repayment_amount: Decimal
    contribution_count: int
    total_contribution_amount: Decimal


class MonthlyTrendRow(ApiModel):
    month: str
    repayments: int
    repayment_amount: Decimal
    contributions: int
    contribution_amount: Decimal
