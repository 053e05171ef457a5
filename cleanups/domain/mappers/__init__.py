"""Domain mappers. Pure conversions between wire shapes and entities."""

from cleanups.domain.mappers.event_attendance_mapper import EventAttendanceMapper
from cleanups.domain.mappers.event_mapper import EventMapper
from cleanups.domain.mappers.photo_mapper import PhotoMapper
from cleanups.domain.mappers.user_mapper import UserMapper

__all__ = ["EventAttendanceMapper", "EventMapper", "PhotoMapper", "UserMapper"]
