"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a production deployment
you should at least override ``SECRET_KEY`` and ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_DAY_LABELS = "Sunday,Monday,Tuesday,Wednesday,Thursday,Friday,Saturday"


def _parse_day_labels(raw: str) -> List[str]:
    """Split a comma-separated list of seven weekday labels, Sunday first."""
    labels = [label.strip() for label in raw.split(",") if label.strip()]
    if len(labels) != 7:
        raise ValueError(f"DAY_LABELS must contain exactly 7 names, got {len(labels)}")
    return labels


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Geo User API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Path of the SQLite database file.  Relative paths are resolved
    # against the package directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "geo_users.db")

    # Prefix under which all user routes are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Weekday labels indexed by day number, 0 = Sunday.  Used to key the
    # weekly registration report.
    day_labels: List[str] = field(
        default_factory=lambda: _parse_day_labels(os.getenv("DAY_LABELS", DEFAULT_DAY_LABELS))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
