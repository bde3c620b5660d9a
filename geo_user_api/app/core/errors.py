"""
Error taxonomy shared by services and the HTTP layer.

Services raise these exceptions instead of ``HTTPException`` so they
stay independent of FastAPI.  ``main.create_app`` registers handlers
that render every ``ApiError`` as a JSON body carrying ``status_code``
and ``message`` (and ``errors`` for validation failures).
"""

from typing import Dict, List, Optional


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Bad or missing input.  ``errors`` maps a field name to its messages."""

    status_code = 422
    default_message = "The given data was invalid."

    def __init__(self, errors: Optional[Dict[str, List[str]]] = None, message: Optional[str] = None) -> None:
        super().__init__(message)
        self.errors: Dict[str, List[str]] = errors or {}

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})


class Unauthorized(ApiError):
    """Missing, invalid or expired authentication."""

    status_code = 401
    default_message = "Unauthorized - Please log in"


class StorageError(ApiError):
    """The persistence layer failed.  Not retried by the service layer."""

    status_code = 500
    default_message = "Storage unavailable"
