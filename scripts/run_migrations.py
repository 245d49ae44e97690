#!/usr/bin/env python3
"""Apply alembic migrations before the API starts.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from guide.config import Settings
from guide.util.logging import setup_logging
from guide.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.exception("Migration failed", error_type=type(e).__name__)
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
