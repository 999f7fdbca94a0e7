"""Entry point for running the Fritter API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the environment variables ``API_HOST`` and ``API_PORT``; the
remaining configuration (database path, secret key, log level) comes
from ``fritter_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from fritter_api.app.core.config import settings
from fritter_api.app.main import app


async def run_api() -> None:
    """Start the API server.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting %s %s", settings.project_name, settings.api_version)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
