"""Entry point for the Geo User API.

Launches the FastAPI application under Uvicorn.  Configuration such
as ``SECRET_KEY``, ``DATABASE_URL`` and ``LOG_LEVEL`` is read from the
environment by ``geo_user_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from geo_user_api.app.main import app


async def main() -> None:
    """Serve the API.

    Host and port are read from environment variables ``HOST`` and
    ``PORT``.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
