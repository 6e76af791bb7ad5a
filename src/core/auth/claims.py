"""Caller identity read from the bearer token of the current request.

Tokens are decoded WITHOUT signature or expiry verification; trust is
established upstream by the authorizer. This module makes no access decision.
"""

from typing import Any

import jwt
from pydantic import BaseModel

from core.errors import ClaimDecodeError

BEARER_PREFIX = "Bearer "
NAME_CLAIM = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/name"
ROLE_CLAIM = "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"
USER_ID_CLAIM = "userId"


class RequestContext(BaseModel):
    headers: dict[str, str] = {}

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "RequestContext":
        """Build from an API Gateway proxy event; single-value headers win."""
        headers: dict[str, str] = {}
        for key, values in (event.get("multiValueHeaders") or {}).items():
            if values:
                headers[key] = values[0]
        headers.update(event.get("headers") or {})
        return cls(headers=headers)


class ClaimsResult(BaseModel):
    user_name: str | None = None
    user_id: str | None = None
    role_name: str | None = None


def _claim(claims: dict[str, Any], claim_type: str) -> str | None:
    value = claims.get(claim_type)
    return None if value is None else str(value)


def decode_claims(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        raise ClaimDecodeError(f"Invalid token: {e}") from e


def read_user(context: RequestContext | None) -> ClaimsResult | None:
    """Return the caller's claims, or None without a context or bearer header.

    Raises ClaimDecodeError when the bearer token is malformed.
    """
    if context is None:
        return None

    auth_header = context.header("Authorization")
    if auth_header is None or not auth_header.startswith(BEARER_PREFIX):
        return None

    token = auth_header[len(BEARER_PREFIX):].strip()
    claims = decode_claims(token)

    return ClaimsResult(
        user_name=_claim(claims, NAME_CLAIM),
        user_id=_claim(claims, USER_ID_CLAIM),
        role_name=_claim(claims, ROLE_CLAIM),
    )
