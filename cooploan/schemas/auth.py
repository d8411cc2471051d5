"""Auth Schemas — login request and token response."""

from pydantic import Field

from cooploan.schemas.common import ApiModel
from cooploan.schemas.member import MemberResponse


class LoginRequest(ApiModel):
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1, max_length=128)


class LoginResponse(ApiModel):
    user: MemberResponse
    token: str
    token_type: str = "bearer"
