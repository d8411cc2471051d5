"""Members — registration, profile updates, removal. Responses embed the organization.

Invariants:
    - Responses never include credentials
    - Unknown organizationId on create/update → 404; duplicate email → 400
    - DELETE refused while the member has loans or contributions
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from cooploan.core.errors import ResourceNotFoundError
from cooploan.core.joins import (
    list_members_with_organization, member_with_organization,
)
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.schemas.member import MemberCreate, MemberResponse, MemberUpdate
from cooploan.services import membership

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/members", tags=["members"])


@router.get("", response_model=list[MemberResponse])
async def list_members(
    organization_id: int | None = Query(None, alias="organizationId"),
    store: LedgerRepository = Depends(get_store),
):
    if organization_id is not None:
        members = store.list_members_by_organization(organization_id)
    else:
        members = store.list_members()
    return list_members_with_organization(store, members)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(member_id: int, store: LedgerRepository = Depends(get_store)):
    member = store.get_member(member_id)
    if member is None:
        raise ResourceNotFoundError("Member", member_id)
    return member_with_organization(store, member)


@router.post(
    "", response_model=MemberResponse, status_code=status.HTTP_201_CREATED,
)
async def create_member(
    body: MemberCreate, store: LedgerRepository = Depends(get_store),
):
    member = membership.register_member(store, **body.model_dump())
    return member_with_organization(store, member)


@router.put("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int, body: MemberUpdate,
    store: LedgerRepository = Depends(get_store),
):
    changes = body.model_dump(exclude_unset=True)
    member = membership.update_member(store, member_id, changes)
    return member_with_organization(store, member)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(member_id: int, store: LedgerRepository = Depends(get_store)):
    store.delete_member(member_id)
    logger.info(f"Member {member_id} deleted", extra={"member_id": member_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
