"""
auth — Caller identity for the meeting relay.

Provides:
  • Signed caller-token issue & verification
  • ``get_current_user_id`` FastAPI dependency
"""
