"""
ConnectorRegistry — discovers meeting connectors and their relays.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from config.settings import config
from connectors.base import BaseConnector
from connectors.errors import ConfigurationError
from connectors.google_meet import GoogleMeetConnector
from connectors.teams import TeamsConnector
from connectors.zoom import ZoomConnector
from core.relay import RelayOrchestrator

logger = logging.getLogger(__name__)

# ── All known connectors — add new ones here ─────────────────────────────

_ALL_CONNECTORS: List[Type[BaseConnector]] = [
    GoogleMeetConnector,
    TeamsConnector,
    ZoomConnector,
]


class ConnectorRegistry:
    """Singleton registry for all meeting connectors."""

    _instance: Optional["ConnectorRegistry"] = None

    def __new__(cls) -> "ConnectorRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._connectors = {}
            cls._instance._relays = {}
            cls._instance._discovered = False
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (tests)."""
        cls._instance = None

    def discover(self) -> None:
        """
        Register every provider listed in ``config.meeting_providers``.

        Raises ``ConfigurationError`` when an enabled provider is unknown or
        lacks credentials, so a misconfigured deployment fails at startup
        instead of on the first request.
        """
        if self._discovered:
            return
        known = {cls().provider_name: cls for cls in _ALL_CONNECTORS}
        for slug in config.meeting_providers:
            cls = known.get(slug)
            if cls is None:
                raise ConfigurationError(
                    slug, reason=f"unknown provider (known: {', '.join(sorted(known))})"
                )
            conn = cls()
            missing = conn.missing_settings()
            if missing:
                raise ConfigurationError(slug, missing)
            self.register(conn)
        self._discovered = True

    def register(self, connector: BaseConnector) -> None:
        self._connectors[connector.provider_name] = connector
        self._relays[connector.provider_name] = RelayOrchestrator(connector)
        logger.info(
            "Connector registered: %s (%s)",
            connector.display_name,
            connector.provider_name,
        )

    def get(self, provider: str) -> Optional[BaseConnector]:
        """Get a connector by provider slug."""
        return self._connectors.get(provider)

    def relay(self, provider: str) -> Optional[RelayOrchestrator]:
        """Get the relay bound to a provider's connector."""
        return self._relays.get(provider)

    def list_providers(self) -> List[Dict[str, object]]:
        """Return info about all known connectors."""
        providers = []
        for cls in _ALL_CONNECTORS:
            conn = cls()
            providers.append(
                {
                    "provider": conn.provider_name,
                    "display_name": conn.display_name,
                    "icon": conn.icon,
                    "configured": conn.is_configured(),
                    "enabled": conn.provider_name in self._connectors,
                }
            )
        return providers

    def list_enabled(self) -> List[str]:
        """Return slugs of registered connectors."""
        return list(self._connectors.keys())
