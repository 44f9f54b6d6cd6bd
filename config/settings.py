"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Google Meet OAuth2 ───────────────────────────────────────────────
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str = ""

    # ── Microsoft Teams OAuth2 ───────────────────────────────────────────
    microsoft_client_id: str = ""
    microsoft_client_secret: str = ""
    microsoft_redirect_uri: str = ""

    # ── Zoom OAuth2 ──────────────────────────────────────────────────────
    zoom_client_id: str = ""
    zoom_client_secret: str = ""
    zoom_redirect_uri: str = ""

    # ── Meeting relay ────────────────────────────────────────────────────
    meeting_providers: list = ["google-meet", "teams"]   # slugs that must be configured at startup
    provider_timeout_seconds: float = 10.0               # bound on every outbound provider call

    # ── Security Secrets ─────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key"       # HMAC secret for caller tokens
    jwt_expiry_seconds: int = 604800                    # 7 days

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
