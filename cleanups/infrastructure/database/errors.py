"""Classification of store exceptions into faults the repositories can map to outcomes.

PostgreSQL (asyncpg) errors are read by SQLSTATE and constraint name; SQLite
errors only carry message text, so the constraint is recovered from it.
"""

import asyncio
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy.exc import DBAPIError, IntegrityError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"
QUERY_CANCELED = "57014"


class FaultKind(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    NOT_NULL = "not_null"
    CANCELLED = "cancelled"
    TIMEOUT = "timeout"
    OTHER = "other"


_SQLSTATE_KINDS = {
    UNIQUE_VIOLATION: FaultKind.UNIQUE,
    FOREIGN_KEY_VIOLATION: FaultKind.FOREIGN_KEY,
    CHECK_VIOLATION: FaultKind.CHECK,
    NOT_NULL_VIOLATION: FaultKind.NOT_NULL,
}

# Actionable messages for the constraints callers can do something about.
CONSTRAINT_HINTS = {
    "fk_events_location": "The specified location does not exist.",
    "fk_events_status": "The specified status does not exist.",
    "fk_event_attendances_event": "The specified event does not exist.",
    "fk_event_attendances_user": "The specified user does not exist.",
    "fk_photos_event": "The specified event does not exist.",
    "fk_users_role": "The specified role does not exist.",
    "fk_password_reset_tokens_user": "The specified user does not exist.",
    "uq_users_email": "A user with this email already exists.",
    "uq_password_reset_tokens_token": "This reset token already exists.",
    "pk_event_attendances": "The user is already attending this event.",
    "ck_events_end_after_start": "End time must be after start time.",
    "ck_events_trash_collected_non_negative": "Trash collected cannot be negative.",
    "ck_events_number_of_attendees_non_negative": "Number of attendees cannot be negative.",
}

# SQLite reports unique violations by column list, not by constraint name.
_SQLITE_UNIQUE_COLUMNS = {
    "users.email": "uq_users_email",
    "password_reset_tokens.token": "uq_password_reset_tokens_token",
    "event_attendances.event_id, event_attendances.user_id": "pk_event_attendances",
}

_SQLITE_PATTERNS = (
    (re.compile(r"UNIQUE constraint failed: (?P<target>.+)$"), FaultKind.UNIQUE),
    (re.compile(r"CHECK constraint failed: (?P<target>\w+)"), FaultKind.CHECK),
    (re.compile(r"NOT NULL constraint failed: (?P<target>[\w.]+)"), FaultKind.NOT_NULL),
    (re.compile(r"FOREIGN KEY constraint failed"), FaultKind.FOREIGN_KEY),
)


@dataclass(frozen=True)
class StoreFault:
    kind: FaultKind
    constraint: Optional[str] = None

    @property
    def hint(self) -> Optional[str]:
        if self.constraint is None:
            return None
        return CONSTRAINT_HINTS.get(self.constraint)


def classify(exc: BaseException) -> StoreFault:
    """Turn an exception raised during a store call into a ``StoreFault``."""
    if isinstance(exc, asyncio.CancelledError):
        return StoreFault(FaultKind.CANCELLED)
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return StoreFault(FaultKind.TIMEOUT)
    if not isinstance(exc, DBAPIError):
        return StoreFault(FaultKind.OTHER)

    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == QUERY_CANCELED:
        return StoreFault(FaultKind.TIMEOUT)
    if sqlstate in _SQLSTATE_KINDS:
        return StoreFault(_SQLSTATE_KINDS[sqlstate], _constraint_name(orig))

    if isinstance(exc, IntegrityError):
        return _classify_sqlite(str(orig))
    return StoreFault(FaultKind.OTHER)


def _constraint_name(orig: object) -> Optional[str]:
    # asyncpg keeps the server-side exception as the cause of the adapted DBAPI error.
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def _classify_sqlite(message: str) -> StoreFault:
    for pattern, kind in _SQLITE_PATTERNS:
        match = pattern.search(message)
        if match is None:
            continue
        target = match.groupdict().get("target")
        if kind is FaultKind.UNIQUE and target:
            target = _SQLITE_UNIQUE_COLUMNS.get(target.strip(), target.strip())
        return StoreFault(kind, target)
    return StoreFault(FaultKind.OTHER)
