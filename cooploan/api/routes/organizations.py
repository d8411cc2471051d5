"""Organizations — CRUD for lending groups.

Invariants:
    - DELETE is refused (400 ENTITY_IN_USE) while members still belong to the organization
    - PUT applies only the fields present in the body
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from cooploan.core.errors import ResourceNotFoundError
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.models import Organization
from cooploan.schemas.organization import (
    OrganizationCreate, OrganizationResponse, OrganizationUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/organizations", tags=["organizations"])


def get_organization_or_404(
    store: LedgerRepository, organization_id: int,
) -> Organization:
    organization = store.get_organization(organization_id)
    if organization is None:
        raise ResourceNotFoundError("Organization", organization_id)
    return organization


@router.get("", response_model=list[OrganizationResponse])
async def list_organizations(store: LedgerRepository = Depends(get_store)):
    return store.list_organizations()


@router.get("/{organization_id}", response_model=OrganizationResponse)
async def get_organization(
    organization_id: int, store: LedgerRepository = Depends(get_store),
):
    return get_organization_or_404(store, organization_id)


@router.post(
    "", response_model=OrganizationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    body: OrganizationCreate, store: LedgerRepository = Depends(get_store),
):
    organization = store.add_organization(
        Organization(name=body.name, created_by=body.created_by),
    )
    logger.info(
        f"Organization {organization.id} created",
        extra={"organization_id": organization.id},
    )
    return organization


@router.put("/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: int, body: OrganizationUpdate,
    store: LedgerRepository = Depends(get_store),
):
    organization = get_organization_or_404(store, organization_id)
    for key, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(organization, key, value)
    return store.save_organization(organization)


@router.delete(
    "/{organization_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_organization(
    organization_id: int, store: LedgerRepository = Depends(get_store),
):
    store.delete_organization(organization_id)
    logger.info(
        f"Organization {organization_id} deleted",
        extra={"organization_id": organization_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
