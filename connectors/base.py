"""
BaseConnector — abstract interface for all meeting connectors.

Every provider (Google Meet, Teams, Zoom, …) subclasses this and implements
the three core methods.  Connectors are stateless: the access token is
handed back to the caller and supplied again on every meeting request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

import httpx

from config.settings import config
from connectors.errors import ConnectorError
from utils.schemas import AuthorizationRequest, MeetingResult, ProviderCredentials

logger = logging.getLogger(__name__)

_LOGGED_BODY_CHARS = 300


class BaseConnector(ABC):
    """Abstract base for all OAuth2 meeting connectors."""

    def __init__(
        self,
        credentials: Optional[ProviderCredentials] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials or self._credentials_from_config()
        self.timeout = timeout if timeout is not None else config.provider_timeout_seconds
        self._transport = transport

    # ── Identity ────────────────────────────────────────────────────────
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Route slug: 'google-meet', 'teams', 'zoom'."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable: 'Google Meet', 'Teams', 'Zoom'."""
        ...

    @property
    @abstractmethod
    def scopes(self) -> List[str]:
        """OAuth scopes requested at consent time."""
        ...

    @property
    def icon(self) -> str:
        """Optional emoji / icon for UI."""
        return "🔗"

    @property
    def settings_prefix(self) -> str:
        """Prefix of this provider's settings, e.g. 'google' → GOOGLE_CLIENT_ID."""
        return self.provider_name

    @property
    def authenticated_message(self) -> str:
        return f"{self.display_name} authenticated"

    # ── OAuth flow ──────────────────────────────────────────────────────

    @abstractmethod
    def build_authorization_url(self) -> str:
        """
        Build the provider's consent URL from static configuration.

        Never performs I/O and never fails.
        """
        ...

    @abstractmethod
    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for a bearer access token.

        Raises ``TokenExchangeError`` on any transport or provider failure.
        """
        ...

    @abstractmethod
    async def create_meeting(
        self,
        access_token: str,
        topic: str,
        start_time: str,
        duration: int,
    ) -> MeetingResult:
        """
        Provision a meeting with the caller's access token.

        Parameters
        ----------
        access_token : str
            Bearer token previously returned by ``exchange_code``.
        topic : str
            Meeting title.
        start_time : str
            ISO-8601 start instant, forwarded as given.
        duration : int
            Length in minutes.

        Returns
        -------
        MeetingResult with the provider's join URL.

        Raises ``MeetingCreationError`` on any transport or provider failure.
        """
        ...

    # ── Helpers ─────────────────────────────────────────────────────────

    def _credentials_from_config(self) -> ProviderCredentials:
        prefix = self.settings_prefix
        return ProviderCredentials(
            client_id=getattr(config, f"{prefix}_client_id", ""),
            client_secret=getattr(config, f"{prefix}_client_secret", ""),
            redirect_uri=getattr(config, f"{prefix}_redirect_uri", ""),
        )

    def missing_settings(self) -> List[str]:
        """Names of the settings this connector still needs."""
        return [f"{self.settings_prefix}_{field}" for field in self.credentials.missing()]

    def is_configured(self) -> bool:
        """
        Return True if this connector has all required config
        (client ID, client secret, redirect URI).
        """
        return not self.missing_settings()

    def authorization_request(self) -> AuthorizationRequest:
        return AuthorizationRequest(
            provider=self.provider_name,
            client_id=self.credentials.client_id,
            redirect_uri=self.credentials.redirect_uri,
            scopes=list(self.scopes),
        )

    def _client(self) -> httpx.AsyncClient:
        """One short-lived client per outbound call, bounded by ``timeout``."""
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def _bearer(self, access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

    def _read_field(
        self,
        response: httpx.Response,
        field: str,
        error_cls: Type[ConnectorError],
    ) -> Any:
        """
        Pull ``field`` out of a provider JSON response.

        Non-2xx statuses, undecodable bodies and a missing or empty field
        all raise ``error_cls``.
        """
        if response.is_error:
            logger.warning(
                "%s %s returned %d: %s",
                self.provider_name,
                response.request.url.path,
                response.status_code,
                response.text[:_LOGGED_BODY_CHARS],
            )
            raise error_cls(
                self.provider_name,
                f"provider responded with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise error_cls(
                self.provider_name,
                "provider response is not JSON",
                status_code=response.status_code,
            ) from exc

        value = data.get(field) if isinstance(data, dict) else None
        if not value:
            # Key names only; bodies here may carry credentials.
            keys = sorted(data) if isinstance(data, dict) else type(data).__name__
            logger.warning(
                "%s response lacks '%s' (keys: %s)", self.provider_name, field, keys
            )
            raise error_cls(
                self.provider_name,
                f"provider response has no '{field}'",
                status_code=response.status_code,
            )
        return value
