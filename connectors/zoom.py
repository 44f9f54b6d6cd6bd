"""
ZoomConnector — Zoom OAuth2 app flow + scheduled meetings.

Zoom authenticates the code exchange with HTTP Basic client credentials
and takes a duration rather than an end time.
"""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote, urlencode

import httpx

from connectors.base import BaseConnector
from connectors.errors import MeetingCreationError, TokenExchangeError
from connectors.timing import format_instant, parse_start_time
from utils.schemas import MeetingResult

logger = logging.getLogger(__name__)

# Zoom OAuth2 / REST endpoints
_ZOOM_AUTH_URL = "https://zoom.us/oauth/authorize"
_ZOOM_TOKEN_URL = "https://zoom.us/oauth/token"
_ZOOM_MEETINGS_URL = "https://api.zoom.us/v2/users/me/meetings"

_SCHEDULED_MEETING = 2


class ZoomConnector(BaseConnector):
    """OAuth2 connector for Zoom."""

    @property
    def provider_name(self) -> str:
        return "zoom"

    @property
    def display_name(self) -> str:
        return "Zoom"

    @property
    def scopes(self) -> List[str]:
        # Granted from the app's configured scopes; nothing requested explicitly.
        return []

    @property
    def icon(self) -> str:
        return "🎥"

    def build_authorization_url(self) -> str:
        req = self.authorization_request()
        params = {
            "response_type": "code",
            "client_id": req.client_id,
            "redirect_uri": req.redirect_uri,
        }
        return f"{_ZOOM_AUTH_URL}?{urlencode(params, quote_via=quote, safe=':/')}"

    async def exchange_code(self, code: str) -> str:
        try:
            async with self._client() as client:
                resp = await client.post(
                    _ZOOM_TOKEN_URL,
                    params={
                        "grant_type": "authorization_code",
                        "code": code,
                        "redirect_uri": self.credentials.redirect_uri,
                    },
                    auth=(self.credentials.client_id, self.credentials.client_secret),
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
        try:
            start = format_instant(parse_start_time(start_time))
        except (TypeError, ValueError, OverflowError) as exc:
            raise MeetingCreationError(
                self.provider_name, f"cannot parse start time: {exc}"
            ) from exc

        try:
            async with self._client() as client:
                resp = await client.post(
                    _ZOOM_MEETINGS_URL,
                    json={
                        "topic": topic,
                        "type": _SCHEDULED_MEETING,
                        "duration": duration,
                        "start_time": start,
                        "settings": {"host_video": True, "participant_video": True},
                    },
                    headers=self._bearer(access_token),
                )
        except httpx.HTTPError as exc:
            raise MeetingCreationError(
                self.provider_name, f"meetings request failed: {exc!r}"
            ) from exc

        join_url = self._read_field(resp, "join_url", MeetingCreationError)
        logger.info("Zoom meeting created for topic %r", topic)
        return MeetingResult(join_url=join_url)
