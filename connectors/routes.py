"""
Meeting relay API routes — authorize, OAuth callback, create meeting.

Route prefix: /api/v1
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from auth.dependencies import get_current_user_id
from connectors.registry import ConnectorRegistry
from core.relay import MEETING_ERROR, RelayOrchestrator
from utils.schemas import CreateMeetingBody, ProviderIdentity, RelayResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["meetings"])


def get_relay(provider: ProviderIdentity) -> RelayOrchestrator:
    """Resolve the relay for an enabled provider, 404 otherwise."""
    relay = ConnectorRegistry().relay(provider.value)
    if relay is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Provider '{provider.value}' not found or not enabled",
        )
    return relay


def _as_json(outcome: RelayResponse) -> JSONResponse:
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)


# ── Routes ─────────────────────────────────────────────────────────────


@router.get("/providers")
async def list_providers() -> List[Dict[str, Any]]:
    """
    List all meeting providers and whether they are configured / enabled.
    No auth required — used by the frontend to show available providers.
    """
    return ConnectorRegistry().list_providers()


@router.get("/{provider}/authorize")
async def authorize(
    relay: RelayOrchestrator = Depends(get_relay),
    user_id: str = Depends(get_current_user_id),
) -> RedirectResponse:
    """Redirect the caller to the provider's consent screen."""
    logger.info("OAuth authorize: user=%s provider=%s", user_id, relay.provider)
    return RedirectResponse(relay.authorize())


@router.get("/{provider}/callback")
async def oauth_callback(
    code: Optional[str] = Query(None),
    relay: RelayOrchestrator = Depends(get_relay),
) -> JSONResponse:
    """
    OAuth callback — the provider redirects here after consent.

    Returns the access token to the caller; nothing is stored server-side.
    A missing code is answered like any other failed exchange.
    """
    return _as_json(await relay.callback(code))


@router.post(
    "/{provider}/createMeeting",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CreateMeetingBody.model_json_schema()}},
        }
    },
)
async def create_meeting(
    request: Request,
    relay: RelayOrchestrator = Depends(get_relay),
    user_id: str = Depends(get_current_user_id),
) -> JSONResponse:
    """
    Create a meeting with the caller-held access token.

    The body is parsed here rather than by FastAPI so that a malformed one
    gets the same fixed 400 as a provider rejection.
    """
    logger.info("Create meeting: user=%s provider=%s", user_id, relay.provider)
    rejected = _as_json(RelayResponse(status_code=400, body={"error": MEETING_ERROR}))
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Create meeting for %s: body is not JSON", relay.provider)
        return rejected
    try:
        body = CreateMeetingBody.model_validate(payload)
    except ValidationError as exc:
        # Field locations only; inputs may include the access token.
        fields = [".".join(str(p) for p in err["loc"]) or "body" for err in exc.errors()]
        logger.warning("Create meeting for %s: invalid fields %s", relay.provider, fields)
        return rejected

    meeting = body.meeting()
    outcome = await relay.create_meeting(
        body.accessToken,
        meeting.topic,
        meeting.start_time,
        meeting.duration,
    )
    return _as_json(outcome)
