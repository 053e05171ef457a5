# scripts/run_schedule_automation.py
#
# Usage: python scripts/run_schedule_automation.py [status|cleanup|all]
# Exits non-zero if any requested operation failed.

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio

from cleanups.config.logging import configure_logging
from cleanups.config.settings import get_settings
from cleanups.container import build_services
from cleanups.core.context import correlation_scope
from cleanups.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    session_scope,
)


async def main(operation: str) -> bool:
    settings = get_settings()
    configure_logging(settings.log_level)
    engine = build_engine(settings)
    ok = True
    try:
        with correlation_scope():
            async with session_scope(build_session_factory(engine)) as session:
                automation = build_services(session, settings).schedule_automation
                if operation in ("status", "all"):
                    ok = await automation.run_status_update() and ok
                if operation in ("cleanup", "all"):
                    ok = await automation.run_nightly_cleanup() and ok
    finally:
        await engine.dispose()
    return ok


if __name__ == "__main__":
    op = sys.argv[1] if len(sys.argv) > 1 else "all"
    if op not in ("status", "cleanup", "all"):
        sys.exit(f"unknown operation: {op}")
    sys.exit(0 if asyncio.run(main(op)) else 1)
