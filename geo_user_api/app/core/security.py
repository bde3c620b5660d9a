"""
Security helpers for password hashing and token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
arbitrary claims and an expiration timestamp (``exp``) and are signed
with the secret key from the application settings.  Passwords are
hashed with PBKDF2‑HMAC‑SHA256 and a random per-password salt.

``get_current_user`` is the FastAPI dependency that resolves the
caller's identity from the ``Authorization: Bearer`` header.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import Unauthorized
from ..schemas.user import UserRecord
from ..services.user_store import UserStore


PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field holding the
    expiration time as a UNIX timestamp.  The token has the form
    ``header.payload.signature`` with each part base64url encoded.
    Clients send it as ``Authorization: Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "user@example.com"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Verifies the HMAC signature and the ``exp`` claim.  Returns the
    payload dictionary on success and ``None`` for any malformed,
    forged or expired token.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        # Constant‑time comparison
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict):
            return None
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
    except (ValueError, TypeError):
        # binascii.Error, JSONDecodeError and UnicodeDecodeError are ValueErrors
        return None
    return data


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    is ``"<salt hex>$<hash hex>"``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UserRecord:
    """Dependency that resolves the authenticated user.

    Raises ``Unauthorized`` when the header is missing, the token is
    invalid or expired, or its subject no longer exists.
    """
    if credentials is None:
        raise Unauthorized()
    payload = decode_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise Unauthorized("Invalid or expired token")

    user = await UserStore.get_by_email(payload["sub"])
    if user is None:
        raise Unauthorized("User no longer exists")
    return user
