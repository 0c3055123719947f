#!/usr/bin/env python3
"""Serve the Prep API with uvicorn.

Logfire and logging are configured here, before the app module is
imported, so that startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from prep.config import Settings
from prep.util.logging import setup_logging
from prep.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Prep API",
        environment=settings.environment,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "prep.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment == "production",
        )
    except Exception:
        logfire.exception("Prep API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
