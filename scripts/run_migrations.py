#!/usr/bin/env python3
"""Upgrade the database schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. ``migrations/env.py`` reads the database
URL from ``DATABASE__URL``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from ideapool.config import Settings
from ideapool.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config(ALEMBIC_INI), revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a stale schema
            raise
        logfire.info("Schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
