# scripts/create_schema.py
#
# Create all tables and seed the role/status lookup rows. Safe to re-run.

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import logging

from cleanups.config.logging import configure_logging
from cleanups.config.settings import get_settings
from cleanups.infrastructure.database.models import create_all, seed_lookups
from cleanups.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    session_scope,
)


async def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    engine = build_engine(settings)
    try:
        await create_all(engine)
        async with session_scope(build_session_factory(engine)) as session:
            await seed_lookups(session)
    finally:
        await engine.dispose()
    logging.getLogger("cleanups").info("schema_created")


if __name__ == "__main__":
    asyncio.run(main())
