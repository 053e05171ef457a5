"""DB-backed event attendance repository.

Rows are keyed by (event_id, user_id). Joining and leaving keep the event's
``number_of_attendees`` counter in step, in the same transaction. Rows of a
soft-deleted event or user are hidden from every read here, as they are from
event reads.
"""

from typing import List, Optional

from sqlalchemy import select, update

from cleanups.core.outcome import Outcome
from cleanups.domain.models.base import utcnow
from cleanups.domain.models.event import Event
from cleanups.domain.models.event_attendance import EVENT_ATTENDANCE_MUTABLE_FIELDS, EventAttendance
from cleanups.domain.models.patch import Patch
from cleanups.domain.models.user import User
from cleanups.infrastructure.database.errors import CONSTRAINT_HINTS
from cleanups.infrastructure.database.event_repository_db import live_events
from cleanups.infrastructure.database.models import EventAttendanceRow, EventRow, UserRow
from cleanups.infrastructure.database.repository import SqlRepository, to_store_datetime
from cleanups.infrastructure.database.row_mapping import (
    attendance_from_row,
    event_from_row,
    user_from_row,
)

EVENT_NOT_FOUND = "Event with the specified ID does not exist."
USER_NOT_FOUND = "User with the specified ID does not exist."
ALREADY_ATTENDING = CONSTRAINT_HINTS["pk_event_attendances"]


def live_attendances():
    """Attendances whose event and user are both live; the same rows event reads show."""
    return (
        select(EventAttendanceRow)
        .join(EventRow, EventRow.event_id == EventAttendanceRow.event_id)
        .join(UserRow, UserRow.user_id == EventAttendanceRow.user_id)
        .where(EventRow.is_deleted.is_(False), UserRow.is_deleted.is_(False))
        .execution_options(populate_existing=True)
    )


class DbEventAttendanceRepository(SqlRepository):
    label = "EventAttendance"
    noun = "event attendance"

    def _attendance_not_found(self, event_id: int, user_id: int) -> Outcome[EventAttendance]:
        return Outcome.not_found(
            f"EventAttendance for event id: {event_id} and user id: {user_id} does not exist"
        )

    async def _load(self, event_id: int, user_id: int) -> Optional[EventAttendanceRow]:
        stmt = (
            live_attendances()
            .where(
                EventAttendanceRow.event_id == event_id,
                EventAttendanceRow.user_id == user_id,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _exists(self, stmt) -> bool:
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def _event_is_live(self, event_id: int) -> bool:
        return await self._exists(
            select(EventRow.event_id).where(
                EventRow.event_id == event_id, EventRow.is_deleted.is_(False)
            )
        )

    async def _user_is_live(self, user_id: int) -> bool:
        return await self._exists(
            select(UserRow.user_id).where(UserRow.user_id == user_id, UserRow.is_deleted.is_(False))
        )

    async def _adjust_attendee_count(self, event_id: int, delta: int) -> None:
        await self._session.execute(
            update(EventRow)
            .where(EventRow.event_id == event_id)
            .values(number_of_attendees=EventRow.number_of_attendees + delta)
            .execution_options(synchronize_session=False)
        )

    async def create(self, entity: EventAttendance) -> Outcome[EventAttendance]:
        async def work() -> Outcome[EventAttendance]:
            if not await self._event_is_live(entity.event_id):
                return Outcome.not_found(EVENT_NOT_FOUND)
            if not await self._user_is_live(entity.user_id):
                return Outcome.not_found(USER_NOT_FOUND)
            if await self._load(entity.event_id, entity.user_id) is not None:
                return Outcome.conflict(ALREADY_ATTENDING)

            row = EventAttendanceRow(
                event_id=entity.event_id,
                user_id=entity.user_id,
                check_in=to_store_datetime(entity.check_in),
                created_date=utcnow(),
                version=1,
            )
            self._session.add(row)
            await self._session.flush()
            await self._adjust_attendee_count(entity.event_id, 1)
            await self._session.commit()
            return Outcome.created(attendance_from_row(row))

        return await self._run("create", work, self._create_fault)

    async def get_all(self) -> Outcome[List[EventAttendance]]:
        async def work() -> Outcome[List[EventAttendance]]:
            stmt = live_attendances().order_by(
                EventAttendanceRow.event_id, EventAttendanceRow.user_id
            )
            result = await self._session.execute(stmt)
            return Outcome.ok([attendance_from_row(row) for row in result.scalars().all()])

        return await self._run("get_all", work)

    async def get_by_ids(self, event_id: int, user_id: int) -> Outcome[EventAttendance]:
        async def work() -> Outcome[EventAttendance]:
            row = await self._load(event_id, user_id)
            if row is None:
                return self._attendance_not_found(event_id, user_id)
            return Outcome.ok(attendance_from_row(row))

        return await self._run("get_by_ids", work)

    async def get_events_by_user_id(self, user_id: int) -> Outcome[List[Event]]:
        """Live events the user attends. NotFound if the user is missing or deleted."""

        async def work() -> Outcome[List[Event]]:
            if not await self._user_is_live(user_id):
                return Outcome.not_found(USER_NOT_FOUND)
            stmt = (
                live_events()
                .join(EventAttendanceRow, EventAttendanceRow.event_id == EventRow.event_id)
                .where(EventAttendanceRow.user_id == user_id)
                .order_by(EventRow.event_id)
            )
            result = await self._session.execute(stmt)
            return Outcome.ok([event_from_row(row) for row in result.scalars().all()])

        return await self._run("get_events_by_user_id", work)

    async def get_users_by_event_id(self, event_id: int) -> Outcome[List[User]]:
        """Live users attending the event. NotFound if the event is missing or deleted."""

        async def work() -> Outcome[List[User]]:
            if not await self._event_is_live(event_id):
                return Outcome.not_found(EVENT_NOT_FOUND)
            stmt = (
                select(UserRow)
                .join(EventAttendanceRow, EventAttendanceRow.user_id == UserRow.user_id)
                .where(
                    EventAttendanceRow.event_id == event_id,
                    UserRow.is_deleted.is_(False),
                )
                .order_by(UserRow.user_id)
                .execution_options(populate_existing=True)
            )
            result = await self._session.execute(stmt)
            return Outcome.ok([user_from_row(row) for row in result.scalars().all()])

        return await self._run("get_users_by_event_id", work)

    async def update(self, entity: EventAttendance) -> Outcome[EventAttendance]:
        """Only ``check_in`` can change."""

        async def work() -> Outcome[EventAttendance]:
            current = await self._load(entity.event_id, entity.user_id)
            if current is None:
                return self._attendance_not_found(entity.event_id, entity.user_id)

            incoming = EventAttendance(
                event_id=entity.event_id,
                user_id=entity.user_id,
                check_in=to_store_datetime(entity.check_in),
            )
            patch = Patch.between(current, incoming, EVENT_ATTENDANCE_MUTABLE_FIELDS)
            expected = entity.version or current.version
            if not patch:
                if expected != current.version:
                    return self._modified()
                return Outcome.ok(attendance_from_row(current))

            swapped = await self._compare_and_swap(
                EventAttendanceRow,
                [
                    EventAttendanceRow.event_id == entity.event_id,
                    EventAttendanceRow.user_id == entity.user_id,
                ],
                expected,
                dict(patch.changes),
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(attendance_from_row(await self._load(entity.event_id, entity.user_id)))

        return await self._run("update", work, self._update_fault)

    async def delete(self, event_id: int, user_id: int) -> Outcome[EventAttendance]:
        async def work() -> Outcome[EventAttendance]:
            current = await self._load(event_id, user_id)
            if current is None:
                return self._attendance_not_found(event_id, user_id)
            removed = attendance_from_row(current)

            swapped = await self._delete_versioned(
                EventAttendanceRow,
                [EventAttendanceRow.event_id == event_id, EventAttendanceRow.user_id == user_id],
                current.version,
            )
            if swapped:
                await self._adjust_attendee_count(event_id, -1)
            conflict = await self._commit_or_conflict(swapped, self._delete_conflict())
            if conflict is not None:
                return conflict
            return Outcome.ok(removed)

        return await self._run("delete", work, self._delete_fault)
