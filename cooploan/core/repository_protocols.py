"""Boundary Protocols — contracts between core and the entity store.

Invariants:
    - Core NEVER imports the concrete store — dependency arrows point inward only
    - Readers return entities in insertion (id) order
    - get_* returns None for unknown ids; writers raise CoopLoanError subclasses

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the store is in-process memory, every call completes
      without suspension, so a mutation is never interleaved with another request
    - EntityReader split from LedgerRepository: joins, statistics and reports
      only need reads
"""

from typing import Protocol

from cooploan.core.domain_types import LoanId, MemberId, OrganizationId, RepaymentId
from cooploan.models import (
    Loan, Member, MonthlyContribution, Organization, Profit, Repayment,
)


class EntityReader(Protocol):
    """Read-only view of the store — used by joins, statistics, reports."""
    def list_organizations(self) -> list[Organization]: ...
    def get_organization(self, organization_id: OrganizationId) -> Organization | None: ...
    def list_members(self) -> list[Member]: ...
    def list_members_by_organization(self, organization_id: OrganizationId) -> list[Member]: ...
    def get_member(self, member_id: MemberId) -> Member | None: ...
    def list_loans(self) -> list[Loan]: ...
    def list_loans_by_member(self, member_id: MemberId) -> list[Loan]: ...
    def list_loans_by_organization(self, organization_id: OrganizationId) -> list[Loan]: ...
    def get_loan(self, loan_id: LoanId) -> Loan | None: ...
    def list_repayments(self) -> list[Repayment]: ...
    def list_repayments_by_loan(self, loan_id: LoanId) -> list[Repayment]: ...
    def list_repayments_by_member(self, member_id: MemberId) -> list[Repayment]: ...
    def get_repayment(self, repayment_id: RepaymentId) -> Repayment | None: ...
    def list_contributions(self) -> list[MonthlyContribution]: ...
    def list_contributions_by_member(
        self, member_id: MemberId,
    ) -> list[MonthlyContribution]: ...
    def list_contributions_by_month(self, month: str) -> list[MonthlyContribution]: ...
    def list_profits(self) -> list[Profit]: ...


class LedgerRepository(EntityReader, Protocol):
    """Full store contract — implemented by infrastructure/memory_store.py."""
    def get_member_by_email(self, email: str) -> Member | None: ...
    def add_organization(self, organization: Organization) -> Organization: ...
    def save_organization(self, organization: Organization) -> Organization: ...
    def delete_organization(self, organization_id: OrganizationId) -> None: ...
    def add_member(self, member: Member) -> Member: ...
    def save_member(self, member: Member) -> Member: ...
    def delete_member(self, member_id: MemberId) -> None: ...
    def add_loan(self, loan: Loan) -> Loan: ...
    def save_loan(self, loan: Loan) -> Loan: ...
    def delete_loan(self, loan_id: LoanId) -> None: ...
    def add_repayment(self, repayment: Repayment) -> Repayment: ...
    def repayment_exists(self, loan_id: LoanId, payment_month: str) -> bool: ...
    def add_contribution(
        self, contribution: MonthlyContribution,
    ) -> MonthlyContribution: ...
    def add_profit(self, profit: Profit) -> Profit: ...
    def get_profit_by_year(self, year: int) -> Profit | None: ...
