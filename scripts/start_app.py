#!/usr/bin/env python3
"""Run the API under uvicorn.

Logging and logfire are configured before the app module is imported, so
startup failures are traced too.
"""

import sys

import logfire
import uvicorn

from guide.config import Settings
from guide.util.logging import setup_logging
from guide.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Guidepedia API", host=settings.api.host, port=settings.api.port
    )
    try:
        uvicorn.run(
            "guide.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.exception("API failed to start", error_type=type(e).__name__)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
