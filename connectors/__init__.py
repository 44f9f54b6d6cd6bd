"""
connectors — OAuth meeting connectors for external conferencing services.

Provides a generic connector framework that handles:
  • OAuth2 auth-URL generation
  • Callback handling (code → access token exchange)
  • Meeting creation with a caller-held bearer token

Tokens are never stored; the caller keeps and resends them.
Each provider (Google Meet, Teams, Zoom) is a subclass of BaseConnector.
"""
