"""Auth — password login issuing a signed bearer token, and token introspection.

Invariants:
    - Bad email or password → 401 INVALID_CREDENTIALS; inactive account → 401 ACCOUNT_INACTIVE
    - Missing/invalid/expired token on /me → 401 INVALID_TOKEN
"""

from fastapi import APIRouter, Depends

from cooploan.api.dependencies import get_current_member
from cooploan.config import Settings, get_settings
from cooploan.core.joins import member_with_organization
from cooploan.core.repository_protocols import LedgerRepository
from cooploan.infrastructure.memory_store import get_store
from cooploan.models import Member
from cooploan.schemas.auth import LoginRequest, LoginResponse
from cooploan.schemas.member import MemberResponse
from cooploan.services.membership import authenticate

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    store: LedgerRepository = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    result = authenticate(store, body.email, body.password, settings)
    return {
        "user": member_with_organization(store, result.member),
        "token": result.token,
    }


@router.get("/me", response_model=MemberResponse)
async def me(
    member: Member = Depends(get_current_member),
    store: LedgerRepository = Depends(get_store),
):
    return member_with_organization(store, member)
