"""
FastAPI dependency for caller identity.

``get_current_user_id`` guards the meeting routes that require an
authenticated caller.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.jwt import verify_caller_token

_bearer_scheme = HTTPBearer()


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
) -> str:
    """
    Extract and verify the Bearer token, returning the caller's ``user_id``.
    """
    return verify_caller_token(credentials.credentials)
