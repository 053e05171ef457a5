# cleanups/core/context.py

import contextvars
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    """Tag every log line emitted inside the block with one correlation id (generated if not given)."""
    value = correlation_id or str(uuid.uuid4())
    token = correlation_id_ctx.set(value)
    try:
        yield value
    finally:
        correlation_id_ctx.reset(token)
