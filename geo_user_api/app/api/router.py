"""
Top‑level API router.

Aggregates the domain routers.  The application mounts this router
under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import users


router = APIRouter()

router.include_router(users.router, tags=["users"])
