"""Domain layer: models, schemas, validators, mappers. Pure business logic only."""

from cleanups.domain.mappers import EventAttendanceMapper, EventMapper, PhotoMapper, UserMapper
from cleanups.domain.models import Event, EventAttendance, EventStatus, Photo, User, UserRole
from cleanups.domain.validators import (
    EventAttendanceValidator,
    EventValidator,
    PhotoValidator,
    UserValidator,
)

__all__ = [
    "Event",
    "EventAttendance",
    "EventAttendanceMapper",
    "EventAttendanceValidator",
    "EventMapper",
    "EventStatus",
    "EventValidator",
    "Photo",
    "PhotoMapper",
    "PhotoValidator",
    "User",
    "UserMapper",
    "UserRole",
    "UserValidator",
]
