"""Relational Joins — compose read models by resolving foreign keys. Pure, read-only.

Invariants:
    - Never mutate the store; every call re-resolves from current store state (no caching)
    - member_with_organization embeds organization=None when unset or unresolvable
    - loan_with_member / repayment_with_loan return None when any link in the chain is missing
    - list_* helpers drop rows whose chain is broken (caller sees fewer rows, never partial ones)
    - password_hash is never copied into a read model
"""

from dataclasses import asdict

from cooploan.core.repository_protocols import EntityReader
from cooploan.models import Loan, Member, Organization, Repayment

_PRIVATE_MEMBER_FIELDS = ("password_hash",)


def organization_view(organization: Organization) -> dict:
    return asdict(organization)


def member_view(member: Member) -> dict:
    """Member fields without credentials."""
    data = asdict(member)
    for key in _PRIVATE_MEMBER_FIELDS:
        data.pop(key, None)
    return data


def member_with_organization(store: EntityReader, member: Member) -> dict:
    organization = (
        store.get_organization(member.organization_id)
        if member.organization_id is not None else None
    )
    return {
        **member_view(member),
        "organization": organization_view(organization) if organization else None,
    }


def loan_with_member(store: EntityReader, loan: Loan) -> dict | None:
    member = store.get_member(loan.member_id)
    if member is None:
        return None
    return {**asdict(loan), "member": member_with_organization(store, member)}


def repayment_with_loan(store: EntityReader, repayment: Repayment) -> dict | None:
    loan = store.get_loan(repayment.loan_id)
    if loan is None:
        return None
    loan_view = loan_with_member(store, loan)
    if loan_view is None:
        return None
    return {**asdict(repayment), "loan": loan_view}


def list_members_with_organization(
    store: EntityReader, members: list[Member],
) -> list[dict]:
    return [member_with_organization(store, m) for m in members]


def list_loans_with_member(store: EntityReader, loans: list[Loan]) -> list[dict]:
    views = (loan_with_member(store, loan) for loan in loans)
    return [v for v in views if v is not None]


def list_repayments_with_loan(
    store: EntityReader, repayments: list[Repayment],
) -> list[dict]:
    views = (repayment_with_loan(store, r) for r in repayments)
    return [v for v in views if v is not None]
