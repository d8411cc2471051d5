"""Credentials & Tokens — salted password hashes and signed bearer tokens.

Invariants:
    - Plaintext passwords are never stored or compared directly
    - Tokens are HS256 JWTs with sub (member id as string), iat and exp claims
    - decode_access_token raises InvalidTokenError for every failure mode

Design Decisions:
    - werkzeug.security for hashing (scrypt/pbkdf2 with per-hash salt)
    - PyJWT for issuance and verification; expiry enforced by PyJWT itself
"""

from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from cooploan.core.errors import InvalidTokenError


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)


def create_access_token(
    member_id: int, secret: str, algorithm: str = "HS256",
    ttl: timedelta = timedelta(hours=12), now: datetime | None = None,
) -> str:
    issued = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(member_id),
        "iat": issued,
        "exp": issued + ttl,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> int:
    """Verify a token and return the member id it was issued for."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError()
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenError()
