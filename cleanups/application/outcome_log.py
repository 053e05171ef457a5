"""One structured log line per service outcome."""

import logging
from typing import Any

from cleanups.core.outcome import Outcome, StatusCode


def log_outcome(logger: logging.Logger, operation: str, outcome: Outcome[Any], **fields: Any) -> None:
    """Successes at INFO, client failures at WARNING, internal failures at ERROR."""
    extra = {"operation": operation, "status_code": outcome.status_code, **fields}
    if outcome.is_success:
        logger.info(operation, extra=extra)
    elif outcome.status == StatusCode.INTERNAL_SERVER_ERROR:
        logger.error(operation, extra={**extra, "error": outcome.error})
    else:
        logger.warning(operation, extra={**extra, "error": outcome.error})
