"""Domain validators. Pure rule checks returning Outcome[bool]."""

from cleanups.domain.validators.event_attendance_validator import EventAttendanceValidator
from cleanups.domain.validators.event_validator import EventValidator
from cleanups.domain.validators.photo_validator import PhotoValidator
from cleanups.domain.validators.user_validator import UserValidator

__all__ = [
    "EventAttendanceValidator",
    "EventValidator",
    "PhotoValidator",
    "UserValidator",
]
