"""
Business logic for registration and login.

Registration validates uniqueness of the email, hashes the password,
stores the user and issues an access token so the client can call
authenticated routes immediately.
"""

import logging

from ..core.errors import Unauthorized, ValidationError
from ..core.security import create_access_token, hash_password, verify_password
from ..schemas.user import RegisteredUser, UserRegister, UserStatus
from .user_store import DUPLICATE_EMAIL_MESSAGE, TIMESTAMP_FORMAT, UserStore, normalize_email


logger = logging.getLogger(__name__)


class RegistrationService:
    """Creates users and exchanges credentials for tokens."""

    @classmethod
    async def register(cls, data: UserRegister) -> RegisteredUser:
        """Register a new user and return its public fields with a token.

        Raises ``ValidationError`` if the email is already taken.  The
        store repeats the check through its UNIQUE constraint, so two
        concurrent registrations of one email cannot both succeed.
        """
        email = normalize_email(str(data.email))
        if await UserStore.email_exists(email):
            raise ValidationError.for_field("email", DUPLICATE_EMAIL_MESSAGE)

        user = await UserStore.create(
            name=data.name,
            email=email,
            password_hash=hash_password(data.password),
            address=data.address,
            latitude=data.latitude,
            longitude=data.longitude,
            status=data.status or UserStatus.ACTIVE,
        )
        logger.info("Registered user %s (id=%s)", user.email, user.id)

        return RegisteredUser(
            name=user.name,
            email=user.email,
            address=user.address,
            latitude=user.latitude,
            longitude=user.longitude,
            status=user.status,
            register_at=user.created_at.strftime(TIMESTAMP_FORMAT),
            token=create_access_token({"sub": user.email}),
        )

    @classmethod
    async def authenticate(cls, email: str, password: str) -> str:
        """Return a fresh access token for valid credentials.

        The email is matched case-insensitively; the token subject is its
        stored lower-case form.
        """
        email = normalize_email(email)
        stored_hash = await UserStore.get_password_hash(email)
        if stored_hash is None or not verify_password(password, stored_hash):
            logger.info("Failed login for %s", email)
            raise Unauthorized("Invalid credentials")
        return create_access_token({"sub": email})
