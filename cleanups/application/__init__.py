# Application layer: services that orchestrate validators, mappers and repositories.

from cleanups.application.event_attendance_service import EventAttendanceService
from cleanups.application.event_service import EventService
from cleanups.application.photo_service import PhotoService
from cleanups.application.repositories import (
    CrudRepository,
    EventAttendanceRepository,
    EventRepository,
    PasswordResetTokenRepository,
    PhotoRepository,
    ScheduleAutomationRepository,
    UserRepository,
)
from cleanups.application.user_service import UserService

__all__ = [
    "CrudRepository",
    "EventAttendanceRepository",
    "EventAttendanceService",
    "EventRepository",
    "EventService",
    "PasswordResetTokenRepository",
    "PhotoRepository",
    "PhotoService",
    "ScheduleAutomationRepository",
    "UserRepository",
    "UserService",
]
