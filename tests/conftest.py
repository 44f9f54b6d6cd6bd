"""
Shared fixtures.
"""

from __future__ import annotations

import pytest

from connectors.registry import ConnectorRegistry
from utils.schemas import ProviderCredentials


@pytest.fixture(autouse=True)
def fresh_registry():
    ConnectorRegistry.reset()
    yield
    ConnectorRegistry.reset()


@pytest.fixture
def credentials() -> ProviderCredentials:
    return ProviderCredentials(
        client_id="client-123",
        client_secret="s3cret",
        redirect_uri="https://relay.example/api/v1/callback",
    )
