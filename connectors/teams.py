"""
TeamsConnector — Microsoft identity platform OAuth2 + Graph online meetings.

The token endpoint takes its grant parameters in the query string, and the
Graph ``onlineMeetings`` call needs an explicit ``endDateTime``.
"""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import quote, urlencode

import httpx

from connectors.base import BaseConnector
from connectors.errors import MeetingCreationError, TokenExchangeError
from connectors.timing import meeting_end_time
from utils.schemas import MeetingResult

logger = logging.getLogger(__name__)

# Microsoft identity platform / Graph endpoints
_MS_AUTH_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/authorize"
_MS_TOKEN_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/token"
_GRAPH_MEETINGS_URL = "https://graph.microsoft.com/v1.0/me/onlineMeetings"

_MEETINGS_SCOPE = "https://graph.microsoft.com/OnlineMeetings.ReadWrite"


class TeamsConnector(BaseConnector):
    """OAuth2 connector for Microsoft Teams."""

    @property
    def provider_name(self) -> str:
        return "teams"

    @property
    def display_name(self) -> str:
        return "Teams"

    @property
    def settings_prefix(self) -> str:
        return "microsoft"

    @property
    def scopes(self) -> List[str]:
        return ["offline_access", _MEETINGS_SCOPE]

    @property
    def token_scope(self) -> str:
        """Scope string sent with the code exchange."""
        return f"{_MEETINGS_SCOPE} offline_access"

    @property
    def icon(self) -> str:
        return "💼"

    def build_authorization_url(self) -> str:
        req = self.authorization_request()
        params = {
            "client_id": req.client_id,
            "response_type": "code",
            "redirect_uri": req.redirect_uri,
            "response_mode": "query",
            "scope": " ".join(req.scopes),
        }
        # Spaces as %20 and URLs left readable, as the v2.0 endpoint documents.
        return f"{_MS_AUTH_URL}?{urlencode(params, quote_via=quote, safe=':/')}"

    async def exchange_code(self, code: str) -> str:
        """Exchange auth code for an access token."""
        try:
            async with self._client() as client:
                resp = await client.post(
                    _MS_TOKEN_URL,
                    params={
                        "grant_type": "authorization_code",
                        "code": code,
                        "redirect_uri": self.credentials.redirect_uri,
                        "client_id": self.credentials.client_id,
                        "client_secret": self.credentials.client_secret,
                        "scope": self.token_scope,
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
        try:
            end_time = meeting_end_time(start_time, duration)
        except (TypeError, ValueError, OverflowError) as exc:
            raise MeetingCreationError(
                self.provider_name, f"cannot compute end time: {exc}"
            ) from exc

        try:
            async with self._client() as client:
                resp = await client.post(
                    _GRAPH_MEETINGS_URL,
                    json={
                        "subject": topic,
                        "startDateTime": start_time,
                        "endDateTime": end_time,
                    },
                    headers=self._bearer(access_token),
                )
        except httpx.HTTPError as exc:
            raise MeetingCreationError(
                self.provider_name, f"onlineMeetings request failed: {exc!r}"
            ) from exc

        join_url = self._read_field(resp, "joinUrl", MeetingCreationError)
        logger.info("Teams meeting created for topic %r", topic)
        return MeetingResult(join_url=join_url)
