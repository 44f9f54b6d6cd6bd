"""
Caller-identity tokens.

The relay does not manage users; it only needs to know that ``authorize``
and ``createMeeting`` callers were authenticated upstream.  Tokens are a
base64 JSON payload plus an HMAC-SHA256 signature keyed by
``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import b64decode

from fastapi import HTTPException, status

from config.settings import config


def _sign(raw: bytes) -> str:
    return hmac.new(config.jwt_secret.encode(), raw, hashlib.sha256).hexdigest()


def verify_caller_token(token: str) -> str:
    """
    Return the ``user_id`` carried by ``token``.

    Raises ``HTTPException(401)`` when the token is malformed, forged or expired.
    """
    try:
        encoded, sig = token.split(".", 1)
        raw = b64decode(encoded, validate=True)
        if not hmac.compare_digest(sig, _sign(raw)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        if payload.get("exp", 0) < time.time():
            raise ValueError("token expired")
        return payload["user_id"]
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid or expired token: {exc}",
        )
