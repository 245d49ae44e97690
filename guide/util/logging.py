"""Standard library logging setup.

Application events go through logfire; this only configures the root
logger so that library and uvicorn output is readable.
"""

import logging
import sys

from guide.config import Settings

# Libraries that log every statement or request at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the given environment."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
