"""Helpers shared by the test modules."""

from typing import Any, Dict

from geo_user_api.app.core.config import settings
from geo_user_api.app.core.db import get_cursor


API = settings.api_prefix


def user_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "secret123",
        "address": "221B Baker Street, London",
        "latitude": 0.0,
        "longitude": 0.0,
    }
    payload.update(overrides)
    return payload


def set_created_at(email: str, timestamp: str) -> None:
    """Backdate a user's registration, e.g. ``"2024-07-07 10:00:00"``."""
    with get_cursor() as cursor:
        cursor.execute("UPDATE users SET created_at = ? WHERE email = ?", (timestamp, email))


def statuses() -> Dict[str, str]:
    with get_cursor() as cursor:
        rows = cursor.execute("SELECT email, status FROM users").fetchall()
    return {row["email"]: row["status"] for row in rows}


def user_count() -> int:
    with get_cursor() as cursor:
        return cursor.execute("SELECT COUNT(*) FROM users").fetchone()[0]
