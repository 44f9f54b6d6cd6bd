"""
Exception hierarchy for meeting connectors.

Connectors raise one of the ``ConnectorError`` subclasses for every failure
that crosses the provider boundary; the relay collapses them into fixed
caller-visible messages.  ``ConfigurationError`` is raised at startup only.
"""

from __future__ import annotations

from typing import List, Optional


class ConnectorError(Exception):
    """Base class for provider-call failures."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(f"[{provider}] {message}")
        self.provider = provider
        self.status_code = status_code


class TokenExchangeError(ConnectorError):
    """The authorization code could not be exchanged for an access token."""


class MeetingCreationError(ConnectorError):
    """The provider did not create a meeting or returned no join URL."""


class ConfigurationError(Exception):
    """An enabled provider is missing client credentials or a redirect URI."""

    def __init__(
        self,
        provider: str,
        missing: Optional[List[str]] = None,
        *,
        reason: Optional[str] = None,
    ) -> None:
        self.provider = provider
        self.missing = missing or []
        if reason is None:
            reason = "missing settings: " + ", ".join(self.missing)
        super().__init__(f"Provider '{provider}' cannot be enabled; {reason}")
