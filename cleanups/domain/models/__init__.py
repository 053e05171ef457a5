"""Domain models. Pure business entities."""

from cleanups.domain.models.base import DomainModel, EntityT, utcnow
from cleanups.domain.models.event import (
    EVENT_MUTABLE_FIELDS,
    Event,
    EventStatus,
    Location,
    Status,
)
from cleanups.domain.models.event_attendance import (
    EVENT_ATTENDANCE_MUTABLE_FIELDS,
    EventAttendance,
)
from cleanups.domain.models.patch import Patch
from cleanups.domain.models.photo import PHOTO_MUTABLE_FIELDS, Photo
from cleanups.domain.models.user import (
    USER_MUTABLE_FIELDS,
    PasswordResetToken,
    Role,
    User,
    UserRole,
)

__all__ = [
    "DomainModel",
    "EntityT",
    "EVENT_ATTENDANCE_MUTABLE_FIELDS",
    "EVENT_MUTABLE_FIELDS",
    "Event",
    "EventAttendance",
    "EventStatus",
    "Location",
    "PHOTO_MUTABLE_FIELDS",
    "PasswordResetToken",
    "Patch",
    "Photo",
    "Role",
    "Status",
    "USER_MUTABLE_FIELDS",
    "User",
    "UserRole",
    "utcnow",
]
