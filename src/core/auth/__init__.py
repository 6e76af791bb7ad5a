"""Caller identity extraction."""

from core.auth.claims import ClaimsResult, RequestContext, read_user

__all__ = ["ClaimsResult", "RequestContext", "read_user"]
