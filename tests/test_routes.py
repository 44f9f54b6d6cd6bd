"""
Boundary tests: the /api/v1/{provider}/… routes over fake providers.
"""

import pytest
from fastapi.testclient import TestClient

from connectors.google_meet import GoogleMeetConnector
from connectors.registry import ConnectorRegistry
from connectors.teams import TeamsConnector
from fakes import caller_token, respond
from main import create_app

MEETING_BODY = {
    "accessToken": "abc123",
    "topic": "Weekly sync",
    "startTime": "2025-01-01T10:00:00Z",
    "duration": 30,
}


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {caller_token('user-1')}"}


def _enable(connector) -> None:
    ConnectorRegistry().register(connector)


class TestAuthorizeRoute:
    def test_redirects_to_consent_url(self, client, auth_headers, credentials):
        conn = TeamsConnector(credentials)
        _enable(conn)

        resp = client.get("/api/v1/teams/authorize", headers=auth_headers, follow_redirects=False)

        assert resp.status_code == 307
        assert resp.headers["location"] == conn.build_authorization_url()

    def test_requires_caller_identity(self, client, credentials):
        _enable(TeamsConnector(credentials))

        resp = client.get("/api/v1/teams/authorize", follow_redirects=False)

        assert resp.status_code in (401, 403)

    def test_invalid_identity_is_401(self, client, credentials):
        _enable(TeamsConnector(credentials))

        resp = client.get(
            "/api/v1/teams/authorize",
            headers={"Authorization": "Bearer forged.token"},
            follow_redirects=False,
        )

        assert resp.status_code == 401

    def test_disabled_provider_is_404(self, client, auth_headers):
        resp = client.get("/api/v1/zoom/authorize", headers=auth_headers, follow_redirects=False)

        assert resp.status_code == 404

    def test_unknown_slug_is_rejected(self, client, auth_headers):
        resp = client.get("/api/v1/webex/authorize", headers=auth_headers, follow_redirects=False)

        assert resp.status_code == 422


class TestCallbackRoute:
    def test_success(self, client, credentials):
        _enable(GoogleMeetConnector(credentials, transport=respond(access_token="abc123")))

        resp = client.get("/api/v1/google-meet/callback", params={"code": "c0de"})

        assert resp.status_code == 200
        assert resp.json() == {"message": "Google Meet authenticated", "accessToken": "abc123"}

    def test_rejected_code(self, client, credentials):
        _enable(TeamsConnector(credentials, transport=respond(400, error="invalid_grant")))

        resp = client.get("/api/v1/teams/callback", params={"code": "used"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "OAuth Error"}

    @pytest.mark.parametrize("params", [{}, {"code": ""}])
    def test_missing_code_is_oauth_error(self, client, credentials, params):
        transport = respond(access_token="abc123")
        _enable(TeamsConnector(credentials, transport=transport))

        resp = client.get("/api/v1/teams/callback", params=params)

        assert resp.status_code == 400
        assert resp.json() == {"error": "OAuth Error"}
        assert transport.requests == []


class TestCreateMeetingRoute:
    def test_success(self, client, auth_headers, credentials):
        transport = respond(joinUrl="https://meet.example/xyz")
        _enable(TeamsConnector(credentials, transport=transport))

        resp = client.post("/api/v1/teams/createMeeting", json=MEETING_BODY, headers=auth_headers)

        assert resp.status_code == 200
        assert resp.json() == {"meetingLink": "https://meet.example/xyz"}
        assert transport.requests[0].headers["Authorization"] == "Bearer abc123"

    def test_missing_join_url(self, client, auth_headers, credentials):
        _enable(GoogleMeetConnector(credentials, transport=respond(id="evt")))

        resp = client.post(
            "/api/v1/google-meet/createMeeting", json=MEETING_BODY, headers=auth_headers
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create meeting"}

    def test_provider_rejection(self, client, auth_headers, credentials):
        _enable(TeamsConnector(credentials, transport=respond(401, error="expired")))

        resp = client.post("/api/v1/teams/createMeeting", json=MEETING_BODY, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create meeting"}

    @pytest.mark.parametrize(
        "body",
        [
            {k: v for k, v in MEETING_BODY.items() if k != "duration"},
            {**MEETING_BODY, "duration": "half an hour"},
            {**MEETING_BODY, "accessToken": None},
            ["not", "an", "object"],
        ],
        ids=["no-duration", "mistyped-duration", "null-token", "array"],
    )
    def test_malformed_body_is_fixed_400(self, client, auth_headers, credentials, body):
        transport = respond(joinUrl="https://meet.example/xyz")
        _enable(TeamsConnector(credentials, transport=transport))

        resp = client.post("/api/v1/teams/createMeeting", json=body, headers=auth_headers)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create meeting"}
        assert transport.requests == []

    def test_non_json_body_is_fixed_400(self, client, auth_headers, credentials):
        _enable(TeamsConnector(credentials, transport=respond(joinUrl="x")))

        resp = client.post(
            "/api/v1/teams/createMeeting",
            content=b"topic=Weekly",
            headers={**auth_headers, "Content-Type": "application/x-www-form-urlencoded"},
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create meeting"}

    def test_out_of_range_duration_is_fixed_400(self, client, auth_headers, credentials):
        _enable(TeamsConnector(credentials, transport=respond(joinUrl="x")))

        resp = client.post(
            "/api/v1/teams/createMeeting",
            json={**MEETING_BODY, "duration": 10**10},
            headers=auth_headers,
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to create meeting"}

    def test_requires_caller_identity(self, client, credentials):
        _enable(TeamsConnector(credentials, transport=respond(joinUrl="x")))

        resp = client.post("/api/v1/teams/createMeeting", json=MEETING_BODY)

        assert resp.status_code in (401, 403)


class TestProvidersRoute:
    def test_lists_known_providers(self, client, credentials):
        _enable(TeamsConnector(credentials))

        resp = client.get("/api/v1/providers")

        assert resp.status_code == 200
        enabled = {p["provider"]: p["enabled"] for p in resp.json()}
        assert enabled == {"google-meet": False, "teams": True, "zoom": False}
        assert "X-Process-Time" in resp.headers
