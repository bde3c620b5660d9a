"""
Persistence for user records.

``UserStore`` is the only place that issues SQL against the ``users``
table.  Each call opens its own connection and closes it before
returning.  ``sqlite3`` failures are logged and re-raised as
``StorageError``; a unique-email violation on insert becomes a
``ValidationError`` on the ``email`` field.  Emails are stored and
looked up in lower case.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from ..core.db import get_connection
from ..core.errors import StorageError, ValidationError
from ..schemas.user import UserRecord, UserStatus


logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "The email has already been taken."
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_USER_COLUMNS = "id, name, email, address, latitude, longitude, status, created_at"


@contextmanager
def _connection() -> Iterator[sqlite3.Connection]:
    conn = None
    try:
        conn = get_connection()
        yield conn
    except sqlite3.Error as exc:
        # Closing without commit discards any partial write.
        logger.exception("User store operation failed")
        raise StorageError() from exc
    finally:
        if conn is not None:
            conn.close()


def parse_timestamp(value: str) -> datetime:
    """Parse a ``CURRENT_TIMESTAMP`` value; SQLite writes these in UTC."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _row_to_user(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        address=row["address"],
        latitude=row["latitude"],
        longitude=row["longitude"],
        status=row["status"],
        created_at=parse_timestamp(row["created_at"]),
    )


class UserStore:
    """Data access for the ``users`` table."""

    @classmethod
    async def email_exists(cls, email: str) -> bool:
        with _connection() as conn:
            row = conn.execute(
                "SELECT 1 FROM users WHERE email = ?", (normalize_email(email),)
            ).fetchone()
            return row is not None

    @classmethod
    async def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        address: str,
        latitude: float,
        longitude: float,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> UserRecord:
        """Insert a user and return the stored record.

        Raises ``ValidationError`` if the email is already registered;
        the insert is rolled back so no partial record remains.
        """
        with _connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO users (name, email, password, address, latitude, longitude, status) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (name, normalize_email(email), password_hash, address, latitude, longitude, status.value),
                )
            except sqlite3.IntegrityError:
                conn.rollback()
                raise ValidationError.for_field("email", DUPLICATE_EMAIL_MESSAGE) from None
            user_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return _row_to_user(row)

    @classmethod
    async def get_by_email(cls, email: str) -> Optional[UserRecord]:
        with _connection() as conn:
            row = conn.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE email = ?", (normalize_email(email),)
            ).fetchone()
            return _row_to_user(row) if row else None

    @classmethod
    async def get_password_hash(cls, email: str) -> Optional[str]:
        with _connection() as conn:
            row = conn.execute(
                "SELECT password FROM users WHERE email = ?", (normalize_email(email),)
            ).fetchone()
            return row["password"] if row else None

    @classmethod
    async def toggle_statuses(cls) -> int:
        """Flip every user's status in one UPDATE and return the row count.

        The flip is evaluated by SQLite per row, so users inserted
        concurrently are either fully before or fully after it.
        """
        with _connection() as conn:
            cursor = conn.execute(
                "UPDATE users SET "
                "status = CASE WHEN status = 'active' THEN 'inactive' ELSE 'active' END, "
                "updated_at = CURRENT_TIMESTAMP"
            )
            conn.commit()
            return cursor.rowcount

    @classmethod
    async def list_all(cls) -> List[UserRecord]:
        """Return every user ordered by creation time, then id."""
        with _connection() as conn:
            rows = conn.execute(
                f"SELECT {_USER_COLUMNS} FROM users ORDER BY created_at ASC, id ASC"
            ).fetchall()
            return [_row_to_user(row) for row in rows]
