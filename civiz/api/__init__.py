"""
API layer for the civiz backend.

Exposes HTTP endpoints under /api/v1 (visions, session, funding, street view).
"""
