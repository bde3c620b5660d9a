"""
Response envelopes.

Every response body carries a numeric ``status_code`` and a
human-readable ``message``; endpoints add their payload next to them.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .user import RegisteredUser, UserSummary


class MessageResponse(BaseModel):
    status_code: int = Field(200, examples=[200])
    message: str


class RegisterResponse(MessageResponse):
    data: RegisteredUser


class TokenResponse(MessageResponse):
    token: str
    token_type: str = "bearer"


class DistanceResponse(MessageResponse):
    distance: str = Field(..., examples=["111.19 km"])


class WeeklyReportResponse(MessageResponse):
    data: Dict[str, List[UserSummary]]


class ErrorResponse(MessageResponse):
    """Body rendered for validation failures; other errors omit ``errors``."""

    errors: Dict[str, List[str]] = {}
