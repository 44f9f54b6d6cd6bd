"""
RelayOrchestrator — provider-agnostic authorize / callback / create-meeting.

One instance per connector.  Every connector failure is collapsed into a
fixed 400 body; provider detail stays in the server log.
"""

from __future__ import annotations

import logging
from typing import Optional

from connectors.base import BaseConnector
from connectors.errors import MeetingCreationError, TokenExchangeError
from utils.schemas import RelayResponse

logger = logging.getLogger(__name__)

OAUTH_ERROR = "OAuth Error"
MEETING_ERROR = "Failed to create meeting"


class RelayOrchestrator:
    def __init__(self, connector: BaseConnector) -> None:
        self.connector = connector

    @property
    def provider(self) -> str:
        return self.connector.provider_name

    def authorize(self) -> str:
        """Consent URL to redirect the caller to."""
        return self.connector.build_authorization_url()

    async def callback(self, code: Optional[str]) -> RelayResponse:
        """
        Exchange ``code`` and hand the access token back to the caller.

        The token is not kept; the caller must resend it to ``create_meeting``.
        """
        if not code:
            logger.warning("OAuth callback for %s arrived without a code", self.provider)
            return RelayResponse(status_code=400, body={"error": OAUTH_ERROR})
        try:
            access_token = await self.connector.exchange_code(code)
        except TokenExchangeError as exc:
            logger.warning("OAuth callback failed for %s: %s", self.provider, exc)
            return RelayResponse(status_code=400, body={"error": OAUTH_ERROR})

        logger.info("OAuth code exchanged for %s", self.provider)
        return RelayResponse(
            body={
                "message": self.connector.authenticated_message,
                "accessToken": access_token,
            }
        )

    async def create_meeting(
        self,
        access_token: str,
        topic: str,
        start_time: str,
        duration: int,
    ) -> RelayResponse:
        """
        Provision a meeting.  Not idempotent: repeating the call may create
        another meeting with a different link.
        """
        try:
            result = await self.connector.create_meeting(
                access_token, topic, start_time, duration
            )
        except MeetingCreationError as exc:
            logger.warning("Meeting creation failed for %s: %s", self.provider, exc)
            return RelayResponse(status_code=400, body={"error": MEETING_ERROR})

        return RelayResponse(body={"meetingLink": result.join_url})
