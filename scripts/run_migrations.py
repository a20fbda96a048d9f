#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c9e1f4a7b21
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from askboard.config import Settings
from askboard.util.logging import setup_logging
from askboard.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("migrations.upgrade", target=target):
        try:
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, target)
            logfire.info("Database migrations applied", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A failed migration must stop the deploy
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
