"""
Top‑level package for the Geo User API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``geo_user_api.app.main:app``.
"""

__all__ = []
