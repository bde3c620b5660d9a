"""
Application package.

``main`` builds the FastAPI app; ``core`` holds configuration,
logging, persistence, errors and security; ``services`` contains the
business logic and ``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
