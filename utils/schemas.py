"""
Pydantic schemas for the meeting relay.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ProviderIdentity(str, Enum):
    """Route slug that selects exactly one connector."""

    GOOGLE_MEET = "google-meet"
    TEAMS = "teams"
    ZOOM = "zoom"


# ═══════════════════════════════════════════════════════════════════════════════
# Connector values
# ═══════════════════════════════════════════════════════════════════════════════


class ProviderCredentials(BaseModel):
    """Static OAuth client configuration for one provider."""

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""

    def missing(self) -> List[str]:
        return [name for name, value in self.model_dump().items() if not value]


class AuthorizationRequest(BaseModel):
    provider: ProviderIdentity
    client_id: str
    redirect_uri: str
    scopes: List[str] = Field(default_factory=list)


class MeetingRequest(BaseModel):
    """
    What the caller asked for.  Values are forwarded to the provider as-is;
    malformed input surfaces as a provider-side rejection.
    """

    topic: str
    start_time: str
    duration: int


class MeetingResult(BaseModel):
    join_url: str


# ═══════════════════════════════════════════════════════════════════════════════
# Boundary — request / response bodies
# ═══════════════════════════════════════════════════════════════════════════════


class CreateMeetingBody(BaseModel):
    accessToken: str
    topic: str
    startTime: str
    duration: int

    def meeting(self) -> MeetingRequest:
        return MeetingRequest(topic=self.topic, start_time=self.startTime, duration=self.duration)


class RelayResponse(BaseModel):
    """HTTP status plus JSON body, as handed back to the router."""

    status_code: int = 200
    body: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def error(self) -> Optional[str]:
        return self.body.get("error")
