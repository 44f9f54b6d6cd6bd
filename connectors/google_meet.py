"""
GoogleMeetConnector — OAuth2 web flow + Calendar events for Google Meet.

Meet links are not created directly: a Calendar event is inserted with a
``conferenceData.createRequest`` and Google attaches a Meet link to it,
returned as ``hangoutLink``.
"""

from __future__ import annotations

import logging
import uuid
from typing import List
from urllib.parse import urlencode

import httpx

from connectors.base import BaseConnector
from connectors.errors import MeetingCreationError, TokenExchangeError
from connectors.timing import meeting_end_time
from utils.schemas import MeetingResult

logger = logging.getLogger(__name__)

# Google OAuth2 / Calendar endpoints
_GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
_GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
_GOOGLE_EVENTS_URL = "https://www.googleapis.com/calendar/v3/calendars/primary/events"


class GoogleMeetConnector(BaseConnector):
    """OAuth2 connector for Google Meet."""

    @property
    def provider_name(self) -> str:
        return "google-meet"

    @property
    def display_name(self) -> str:
        return "Google Meet"

    @property
    def settings_prefix(self) -> str:
        return "google"

    @property
    def scopes(self) -> List[str]:
        return ["https://www.googleapis.com/auth/calendar.events"]

    @property
    def icon(self) -> str:
        return "📹"

    def build_authorization_url(self) -> str:
        req = self.authorization_request()
        params = {
            "access_type": "offline",
            "scope": " ".join(req.scopes),
            "response_type": "code",
            "client_id": req.client_id,
            "redirect_uri": req.redirect_uri,
        }
        return f"{_GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """Exchange auth code for an access token."""
        try:
            async with self._client() as client:
                resp = await client.post(
                    _GOOGLE_TOKEN_URL,
                    data={
                        "code": code,
                        "client_id": self.credentials.client_id,
                        "client_secret": self.credentials.client_secret,
                        "redirect_uri": self.credentials.redirect_uri,
                        "grant_type": "authorization_code",
                    },
                )
        except httpx.HTTPError as exc:
            raise TokenExchangeError(
                self.provider_name, f"token request failed: {exc!r}"
            ) from exc

        return self._read_field(resp, "access_token", TokenExchangeError)

    async def create_meeting(
        self,
        access_token: str,
        topic: str,
        start_time: str,
        duration: int,
    ) -> MeetingResult:
        """Insert a Calendar event with a Meet conference attached."""
        try:
            end_time = meeting_end_time(start_time, duration)
        except (TypeError, ValueError, OverflowError) as exc:
            raise MeetingCreationError(
                self.provider_name, f"cannot compute end time: {exc}"
            ) from exc

        event = {
            "summary": topic,
            "start": {"dateTime": start_time},
            "end": {"dateTime": end_time},
            # Google dedupes conference requests on requestId; unique per call.
            "conferenceData": {"createRequest": {"requestId": f"meet-{uuid.uuid4().hex}"}},
        }
        try:
            async with self._client() as client:
                resp = await client.post(
                    _GOOGLE_EVENTS_URL,
                    params={"conferenceDataVersion": 1},
                    json=event,
                    headers=self._bearer(access_token),
                )
        except httpx.HTTPError as exc:
            raise MeetingCreationError(
                self.provider_name, f"event request failed: {exc!r}"
            ) from exc

        join_url = self._read_field(resp, "hangoutLink", MeetingCreationError)
        logger.info("Google Meet event created for topic %r", topic)
        return MeetingResult(join_url=join_url)
