"""Store row -> domain entity conversion. Entities never keep a reference to a row."""

from cleanups.domain.models.event import Event, Location, Status
from cleanups.domain.models.event_attendance import EventAttendance
from cleanups.domain.models.photo import Photo
from cleanups.domain.models.user import PasswordResetToken, User
from cleanups.infrastructure.database.models import (
    EventAttendanceRow,
    EventRow,
    PasswordResetTokenRow,
    PhotoRow,
    UserRow,
)


def attendance_from_row(row: EventAttendanceRow) -> EventAttendance:
    return EventAttendance(
        event_id=row.event_id,
        user_id=row.user_id,
        check_in=row.check_in,
        created_date=row.created_date,
        version=row.version,
    )


def photo_from_row(row: PhotoRow) -> Photo:
    return Photo(
        photo_id=row.photo_id,
        event_id=row.event_id,
        photo_data=row.photo_data,
        caption=row.caption,
        version=row.version,
    )


def user_from_row(row: UserRow) -> User:
    return User(
        user_id=row.user_id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        role_id=row.role_id,
        created_date=row.created_date,
        is_deleted=row.is_deleted,
        version=row.version,
    )


def event_from_row(row: EventRow) -> Event:
    """Requires status, location, attendances (with users) and photos to be loaded."""
    return Event(
        event_id=row.event_id,
        title=row.title,
        description=row.description,
        start_time=row.start_time,
        end_time=row.end_time,
        family_friendly=row.family_friendly,
        trash_collected=row.trash_collected,
        number_of_attendees=row.number_of_attendees,
        status_id=row.status_id,
        location_id=row.location_id,
        is_deleted=row.is_deleted,
        version=row.version,
        status=Status(id=row.status.id, name=row.status.name),
        location=Location(
            location_id=row.location.location_id,
            latitude=row.location.latitude,
            longitude=row.location.longitude,
        ),
        # Attendances of soft-deleted users are hidden.
        attendances=[attendance_from_row(a) for a in row.attendances if not a.user.is_deleted],
        photos=[photo_from_row(p) for p in row.photos],
    )


def token_from_row(row: PasswordResetTokenRow) -> PasswordResetToken:
    return PasswordResetToken(
        id=row.id,
        user_id=row.user_id,
        token=row.token,
        expiration_date=row.expiration_date,
        is_used=row.is_used,
        created_date=row.created_date,
    )
