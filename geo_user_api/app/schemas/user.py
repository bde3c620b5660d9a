"""
Pydantic models for user data.

Defines the registration and login payloads, the internal
``UserRecord`` returned by the store and the public projections sent
back to clients.  Password hashes never leave the service layer.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, constr


# Surrounding whitespace is stripped before the length check.
Text = constr(strip_whitespace=True, min_length=1)


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserRegister(BaseModel):
    """Schema for registering a user.

    ``status`` is optional and defaults to ``active``.  Latitude and
    longitude are both required and must lie in their valid ranges.
    """

    name: Text = Field(..., examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=6, examples=["secret123"])
    address: Text = Field(..., examples=["221B Baker Street, London"])
    latitude: float = Field(..., ge=-90, le=90, examples=[51.5237])
    longitude: float = Field(..., ge=-180, le=180, examples=[-0.1585])
    status: Optional[UserStatus] = Field(None, examples=["active"])


class UserLogin(BaseModel):
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=1, examples=["secret123"])


class UserRecord(BaseModel):
    """A stored user as seen by the services (without the password hash)."""

    id: int
    name: str
    email: str
    address: str
    latitude: float
    longitude: float
    status: UserStatus
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class RegisteredUser(BaseModel):
    """Public fields returned after registration, plus the issued token."""

    name: str
    email: str
    address: str
    latitude: float
    longitude: float
    status: UserStatus
    register_at: str = Field(..., examples=["2024-07-01 09:30:00"])
    token: str


class UserSummary(BaseModel):
    """Projection used by the weekly report."""

    name: str
    email: str
