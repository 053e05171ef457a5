"""Service wiring: one set of repositories and services per session.

Validators and mappers hold no state and are built once at import; repositories
and services are built per unit of work around the caller's ``AsyncSession``.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cleanups.application.event_attendance_service import EventAttendanceService
from cleanups.application.event_service import EventService
from cleanups.application.photo_service import PhotoService
from cleanups.application.user_service import UserService
from cleanups.config.settings import AppSettings, get_settings
from cleanups.domain.mappers import EventAttendanceMapper, EventMapper, PhotoMapper, UserMapper
from cleanups.domain.validators import (
    EventAttendanceValidator,
    EventValidator,
    PhotoValidator,
    UserValidator,
)
from cleanups.infrastructure.database.event_attendance_repository_db import (
    DbEventAttendanceRepository,
)
from cleanups.infrastructure.database.event_repository_db import DbEventRepository
from cleanups.infrastructure.database.password_reset_token_repository_db import (
    DbPasswordResetTokenRepository,
)
from cleanups.infrastructure.database.photo_repository_db import DbPhotoRepository
from cleanups.infrastructure.database.schedule_automation_repository_db import (
    DbScheduleAutomationRepository,
)
from cleanups.infrastructure.database.user_repository_db import DbUserRepository

EVENT_VALIDATOR = EventValidator()
EVENT_ATTENDANCE_VALIDATOR = EventAttendanceValidator()
PHOTO_VALIDATOR = PhotoValidator()
USER_VALIDATOR = UserValidator()

EVENT_ATTENDANCE_MAPPER = EventAttendanceMapper()
PHOTO_MAPPER = PhotoMapper()
USER_MAPPER = UserMapper()
EVENT_MAPPER = EventMapper(attendance_mapper=EVENT_ATTENDANCE_MAPPER, photo_mapper=PHOTO_MAPPER)


@dataclass(frozen=True)
class Services:
    events: EventService
    event_attendances: EventAttendanceService
    photos: PhotoService
    users: UserService
    password_reset_tokens: DbPasswordResetTokenRepository
    schedule_automation: DbScheduleAutomationRepository


def build_services(session: AsyncSession, settings: Optional[AppSettings] = None) -> Services:
    settings = settings or get_settings()
    logger = logging.getLogger("cleanups")

    return Services(
        events=EventService(
            repository=DbEventRepository(session, logger.getChild("repository.event")),
            validator=EVENT_VALIDATOR,
            mapper=EVENT_MAPPER,
            logger=logger.getChild("service.event"),
        ),
        event_attendances=EventAttendanceService(
            repository=DbEventAttendanceRepository(
                session, logger.getChild("repository.event_attendance")
            ),
            validator=EVENT_ATTENDANCE_VALIDATOR,
            mapper=EVENT_ATTENDANCE_MAPPER,
            event_mapper=EVENT_MAPPER,
            user_mapper=USER_MAPPER,
            logger=logger.getChild("service.event_attendance"),
        ),
        photos=PhotoService(
            repository=DbPhotoRepository(session, logger.getChild("repository.photo")),
            validator=PHOTO_VALIDATOR,
            mapper=PHOTO_MAPPER,
            logger=logger.getChild("service.photo"),
        ),
        users=UserService(
            repository=DbUserRepository(session, logger.getChild("repository.user")),
            validator=USER_VALIDATOR,
            mapper=USER_MAPPER,
            logger=logger.getChild("service.user"),
        ),
        password_reset_tokens=DbPasswordResetTokenRepository(
            session,
            token_ttl=timedelta(minutes=settings.password_reset_token_ttl_minutes),
            logger=logger.getChild("repository.password_reset_token"),
        ),
        schedule_automation=DbScheduleAutomationRepository(
            session,
            retention=timedelta(days=settings.soft_delete_retention_days),
            logger=logger.getChild("repository.schedule_automation"),
        ),
    )
