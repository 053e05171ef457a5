# cleanups/infrastructure/database/models.py
#
# Constraint names are part of the contract: store errors are classified by them.

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Integer,
    LargeBinary,
    Numeric,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.orm import relationship

from cleanups.domain.models.base import utcnow
from cleanups.domain.models.event import EventStatus
from cleanups.domain.models.user import UserRole
from cleanups.infrastructure.database.session import Base


class VersionedModel(Base):
    __abstract__ = True

    # Optimistic-concurrency token; every write bumps it in the same statement.
    version = Column(Integer, nullable=False, default=1)


class SoftDeleteModel(VersionedModel):
    __abstract__ = True

    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_date = Column(DateTime, nullable=True)


class RoleRow(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)


class StatusRow(Base):
    __tablename__ = "statuses"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)


class LocationRow(Base):
    __tablename__ = "locations"

    location_id = Column(Integer, primary_key=True, autoincrement=True)
    latitude = Column(Numeric(9, 6), nullable=False)
    longitude = Column(Numeric(9, 6), nullable=False)


class EventRow(SoftDeleteModel):
    __tablename__ = "events"
    __table_args__ = (
        ForeignKeyConstraint(["status_id"], ["statuses.id"], name="fk_events_status"),
        ForeignKeyConstraint(
            ["location_id"], ["locations.location_id"], name="fk_events_location"
        ),
        CheckConstraint("end_time > start_time", name="ck_events_end_after_start"),
        CheckConstraint("trash_collected >= 0", name="ck_events_trash_collected_non_negative"),
        CheckConstraint(
            "number_of_attendees >= 0", name="ck_events_number_of_attendees_non_negative"
        ),
    )

    event_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    family_friendly = Column(Boolean, nullable=False, default=False)
    trash_collected = Column(Numeric(10, 2), nullable=False, default=0)
    number_of_attendees = Column(Integer, nullable=False, default=0)
    status_id = Column(Integer, nullable=False, default=EventStatus.UPCOMING.value)
    location_id = Column(Integer, nullable=False, index=True)

    status = relationship("StatusRow", lazy="raise")
    location = relationship("LocationRow", lazy="raise")
    attendances = relationship(
        "EventAttendanceRow",
        back_populates="event",
        order_by="EventAttendanceRow.user_id",
        lazy="raise",
    )
    photos = relationship("PhotoRow", order_by="PhotoRow.photo_id", lazy="raise")


class UserRow(SoftDeleteModel):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        ForeignKeyConstraint(["role_id"], ["roles.id"], name="fk_users_role"),
    )

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(Integer, nullable=False, default=UserRole.VOLUNTEER.value)
    created_date = Column(DateTime, nullable=False, default=utcnow)


class EventAttendanceRow(VersionedModel):
    __tablename__ = "event_attendances"
    __table_args__ = (
        PrimaryKeyConstraint("event_id", "user_id", name="pk_event_attendances"),
        ForeignKeyConstraint(
            ["event_id"],
            ["events.event_id"],
            name="fk_event_attendances_event",
            ondelete="CASCADE",
        ),
        ForeignKeyConstraint(
            ["user_id"],
            ["users.user_id"],
            name="fk_event_attendances_user",
            ondelete="CASCADE",
        ),
    )

    event_id = Column(Integer, nullable=False)
    user_id = Column(Integer, nullable=False, index=True)
    check_in = Column(DateTime, nullable=True)
    created_date = Column(DateTime, nullable=False, default=utcnow)

    event = relationship("EventRow", back_populates="attendances", lazy="raise")
    user = relationship("UserRow", lazy="raise")


class PhotoRow(VersionedModel):
    __tablename__ = "photos"
    __table_args__ = (
        ForeignKeyConstraint(["event_id"], ["events.event_id"], name="fk_photos_event"),
    )

    photo_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, nullable=False, index=True)
    photo_data = Column(LargeBinary, nullable=False)
    caption = Column(String(200), nullable=True)


class PasswordResetTokenRow(Base):
    __tablename__ = "password_reset_tokens"
    __table_args__ = (UniqueConstraint("token", name="uq_password_reset_tokens_token"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey(
            "users.user_id", name="fk_password_reset_tokens_user", ondelete="CASCADE"
        ),
        nullable=False,
        index=True,
    )
    token = Column(String(128), nullable=False)
    expiration_date = Column(DateTime, nullable=False)
    is_used = Column(Boolean, nullable=False, default=False)
    created_date = Column(DateTime, nullable=False, default=utcnow)


async def create_all(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_lookups(session: AsyncSession) -> None:
    """Insert or refresh the role and status lookup rows. Ids match the domain enums."""
    for role in UserRole:
        await session.merge(RoleRow(id=role.value, name=role.display_name))
    for status in EventStatus:
        await session.merge(StatusRow(id=status.value, name=status.display_name))
    await session.commit()
