"""In-Memory Entity Store — the ledger repository with referential integrity.

Invariants:
    - Ids are per-collection, start at 1, increase monotonically, never reused
    - Collections iterate in insertion (id) order
    - Reads return copies: callers never alias stored instances, so a failed
      write leaves the store unchanged
    - Foreign keys are checked on insert/save (ResourceNotFoundError)
    - Deletes are RESTRICTED while other entities reference the target
      (EntityInUseError); nothing dangles
    - (loan_id, payment_month), (member_id, month), year and email are unique

Design Decisions:
    - Dict-per-collection keyed by id: O(1) lookup, dicts keep insertion order
    - Singleton store initialized on startup via init_store (FastAPI lifespan);
      routes receive it through the get_store dependency, tests override it
    - No locking: every method is synchronous, so under the single event loop
      a read-modify-write completes before another request runs
"""

import copy
import logging
from dataclasses import dataclass, field

from cooploan.core.errors import (
    DuplicateContributionError, DuplicateEmailError, DuplicatePaymentError,
    DuplicateProfitYearError, EntityInUseError, ResourceNotFoundError,
)
from cooploan.models import (
    Loan, Member, MonthlyContribution, Organization, Profit, Repayment,
)

logger = logging.getLogger(__name__)


@dataclass
class InMemoryStore:
    """Entity store for the cooperative ledger — implements LedgerRepository."""

    _organizations: dict[int, Organization] = field(default_factory=dict)
    _members: dict[int, Member] = field(default_factory=dict)
    _loans: dict[int, Loan] = field(default_factory=dict)
    _repayments: dict[int, Repayment] = field(default_factory=dict)
    _contributions: dict[int, MonthlyContribution] = field(default_factory=dict)
    _profits: dict[int, Profit] = field(default_factory=dict)
    _next_ids: dict[str, int] = field(default_factory=lambda: {
        "organizations": 1, "members": 1, "loans": 1,
        "repayments": 1, "contributions": 1, "profits": 1,
    })

    def _assign_id(self, collection: str) -> int:
        next_id = self._next_ids[collection]
        self._next_ids[collection] = next_id + 1
        return next_id

    # ─── Organizations ───────────────────────────────────────────

    def list_organizations(self) -> list[Organization]:
        return [copy.copy(o) for o in self._organizations.values()]

    def get_organization(self, organization_id: int) -> Organization | None:
        org = self._organizations.get(organization_id)
        return copy.copy(org) if org else None

    def add_organization(self, organization: Organization) -> Organization:
        self._check_organization_refs(organization)
        organization.id = self._assign_id("organizations")
        self._organizations[organization.id] = copy.copy(organization)
        logger.debug(f"Organization {organization.id} added")
        return copy.copy(organization)

    def save_organization(self, organization: Organization) -> Organization:
        if organization.id not in self._organizations:
            raise ResourceNotFoundError("Organization", organization.id)
        self._check_organization_refs(organization)
        self._organizations[organization.id] = copy.copy(organization)
        return copy.copy(organization)

    def delete_organization(self, organization_id: int) -> None:
        if organization_id not in self._organizations:
            raise ResourceNotFoundError("Organization", organization_id)
        if any(m.organization_id == organization_id for m in self._members.values()):
            raise EntityInUseError("Organization", organization_id, "members")
        del self._organizations[organization_id]

    def _check_organization_refs(self, organization: Organization) -> None:
        if organization.created_by not in self._members:
            raise ResourceNotFoundError("Member", organization.created_by)

    # ─── Members ─────────────────────────────────────────────────

    def list_members(self) -> list[Member]:
        return [copy.copy(m) for m in self._members.values()]

    def list_members_by_organization(self, organization_id: int) -> list[Member]:
        return [
            copy.copy(m) for m in self._members.values()
            if m.organization_id == organization_id
        ]

    def get_member(self, member_id: int) -> Member | None:
        member = self._members.get(member_id)
        return copy.copy(member) if member else None

    def get_member_by_email(self, email: str) -> Member | None:
        wanted = email.strip().lower()
        for member in self._members.values():
            if member.email.lower() == wanted:
                return copy.copy(member)
        return None

    def add_member(self, member: Member) -> Member:
        self._check_member_refs(member)
        member.id = self._assign_id("members")
        self._members[member.id] = copy.copy(member)
        logger.debug(f"Member {member.id} added")
        return copy.copy(member)

    def save_member(self, member: Member) -> Member:
        if member.id not in self._members:
            raise ResourceNotFoundError("Member", member.id)
        self._check_member_refs(member)
        self._members[member.id] = copy.copy(member)
        return copy.copy(member)

    def delete_member(self, member_id: int) -> None:
        if member_id not in self._members:
            raise ResourceNotFoundError("Member", member_id)
        if any(loan.member_id == member_id for loan in self._loans.values()):
            raise EntityInUseError("Member", member_id, "loans")
        if any(c.member_id == member_id for c in self._contributions.values()):
            raise EntityInUseError("Member", member_id, "contributions")
        if any(o.created_by == member_id for o in self._organizations.values()):
            raise EntityInUseError("Member", member_id, "organizations")
        del self._members[member_id]

    def _check_member_refs(self, member: Member) -> None:
        """Email uniqueness (case-insensitive) and organization reference."""
        existing = self.get_member_by_email(member.email)
        if existing and existing.id != member.id:
            raise DuplicateEmailError(member.email)
        if (
            member.organization_id is not None
            and member.organization_id not in self._organizations
        ):
            raise ResourceNotFoundError("Organization", member.organization_id)

    # ─── Loans ───────────────────────────────────────────────────

    def list_loans(self) -> list[Loan]:
        return [copy.copy(loan) for loan in self._loans.values()]

    def list_loans_by_member(self, member_id: int) -> list[Loan]:
        return [
            copy.copy(loan) for loan in self._loans.values()
            if loan.member_id == member_id
        ]

    def list_loans_by_organization(self, organization_id: int) -> list[Loan]:
        member_ids = {
            m.id for m in self._members.values()
            if m.organization_id == organization_id
        }
        return [
            copy.copy(loan) for loan in self._loans.values()
            if loan.member_id in member_ids
        ]

    def get_loan(self, loan_id: int) -> Loan | None:
        loan = self._loans.get(loan_id)
        return copy.copy(loan) if loan else None

    def add_loan(self, loan: Loan) -> Loan:
        if loan.member_id not in self._members:
            raise ResourceNotFoundError("Member", loan.member_id)
        loan.id = self._assign_id("loans")
        self._loans[loan.id] = copy.copy(loan)
        logger.debug(f"Loan {loan.id} added")
        return copy.copy(loan)

    def save_loan(self, loan: Loan) -> Loan:
        if loan.id not in self._loans:
            raise ResourceNotFoundError("Loan", loan.id)
        if loan.member_id not in self._members:
            raise ResourceNotFoundError("Member", loan.member_id)
        self._loans[loan.id] = copy.copy(loan)
        return copy.copy(loan)

    def delete_loan(self, loan_id: int) -> None:
        if loan_id not in self._loans:
            raise ResourceNotFoundError("Loan", loan_id)
        if any(r.loan_id == loan_id for r in self._repayments.values()):
            raise EntityInUseError("Loan", loan_id, "repayments")
        del self._loans[loan_id]

    # ─── Repayments ──────────────────────────────────────────────

    def list_repayments(self) -> list[Repayment]:
        return [copy.copy(r) for r in self._repayments.values()]

    def list_repayments_by_loan(self, loan_id: int) -> list[Repayment]:
        return [
            copy.copy(r) for r in self._repayments.values() if r.loan_id == loan_id
        ]

    def list_repayments_by_member(self, member_id: int) -> list[Repayment]:
        loan_ids = {
            loan.id for loan in self._loans.values() if loan.member_id == member_id
        }
        return [
            copy.copy(r) for r in self._repayments.values() if r.loan_id in loan_ids
        ]

    def get_repayment(self, repayment_id: int) -> Repayment | None:
        repayment = self._repayments.get(repayment_id)
        return copy.copy(repayment) if repayment else None

    def repayment_exists(self, loan_id: int, payment_month: str) -> bool:
        return any(
            r.loan_id == loan_id and r.payment_month == payment_month
            for r in self._repayments.values()
        )

    def add_repayment(self, repayment: Repayment) -> Repayment:
        if repayment.loan_id not in self._loans:
            raise ResourceNotFoundError("Loan", repayment.loan_id)
        if self.repayment_exists(repayment.loan_id, repayment.payment_month):
            raise DuplicatePaymentError(repayment.loan_id, repayment.payment_month)
        repayment.id = self._assign_id("repayments")
        self._repayments[repayment.id] = copy.copy(repayment)
        logger.debug(f"Repayment {repayment.id} added")
        return copy.copy(repayment)

    # ─── Contributions ───────────────────────────────────────────

    def list_contributions(self) -> list[MonthlyContribution]:
        return [copy.copy(c) for c in self._contributions.values()]

    def list_contributions_by_member(self, member_id: int) -> list[MonthlyContribution]:
        return [
            copy.copy(c) for c in self._contributions.values()
            if c.member_id == member_id
        ]

    def list_contributions_by_month(self, month: str) -> list[MonthlyContribution]:
        return [
            copy.copy(c) for c in self._contributions.values() if c.month == month
        ]

    def add_contribution(
        self, contribution: MonthlyContribution,
    ) -> MonthlyContribution:
        if contribution.member_id not in self._members:
            raise ResourceNotFoundError("Member", contribution.member_id)
        if any(
            c.member_id == contribution.member_id and c.month == contribution.month
            for c in self._contributions.values()
        ):
            raise DuplicateContributionError(contribution.member_id, contribution.month)
        contribution.id = self._assign_id("contributions")
        self._contributions[contribution.id] = copy.copy(contribution)
        return copy.copy(contribution)

    # ─── Profits ─────────────────────────────────────────────────

    def list_profits(self) -> list[Profit]:
        return [copy.copy(p) for p in self._profits.values()]

    def get_profit_by_year(self, year: int) -> Profit | None:
        for profit in self._profits.values():
            if profit.year == year:
                return copy.copy(profit)
        return None

    def add_profit(self, profit: Profit) -> Profit:
        if self.get_profit_by_year(profit.year):
            raise DuplicateProfitYearError(profit.year)
        profit.id = self._assign_id("profits")
        self._profits[profit.id] = copy.copy(profit)
        return copy.copy(profit)


# Singleton (initialized on startup)
store: InMemoryStore | None = None


def init_store(bootstrap_members: list[Member] | None = None) -> InMemoryStore:
    """Create the process-wide store, seeding any bootstrap members."""
    global store
    store = InMemoryStore()
    for member in bootstrap_members or []:
        store.add_member(member)
        logger.info(f"Bootstrap member {member.email} seeded")
    return store


def get_store() -> InMemoryStore:
    """FastAPI dependency for the entity store."""
    if store is None:
        raise RuntimeError("Entity store not initialized")
    return store
