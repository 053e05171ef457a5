"""DB-backed event repository. Events are soft deleted and version-checked on every write."""

from dataclasses import replace
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from cleanups.core.outcome import Outcome
from cleanups.domain.models.base import utcnow
from cleanups.domain.models.event import EVENT_MUTABLE_FIELDS, Event
from cleanups.domain.models.patch import Patch
from cleanups.infrastructure.database.models import (
    EventAttendanceRow,
    EventRow,
    LocationRow,
    StatusRow,
)
from cleanups.infrastructure.database.repository import SqlRepository, to_store_datetime
from cleanups.infrastructure.database.row_mapping import event_from_row

STATUS_NOT_FOUND = "The specified status does not exist."
LOCATION_NOT_FOUND = "The specified location does not exist."


def live_events():
    """SELECT of non-deleted events with every navigation needed by ``event_from_row``."""
    return (
        select(EventRow)
        .where(EventRow.is_deleted.is_(False))
        .options(
            selectinload(EventRow.status),
            selectinload(EventRow.location),
            selectinload(EventRow.attendances).selectinload(EventAttendanceRow.user),
            selectinload(EventRow.photos),
        )
        .execution_options(populate_existing=True)
    )


class DbEventRepository(SqlRepository):
    """Implements the EventRepository protocol against the ``events`` table."""

    label = "Event"
    noun = "event"

    async def _load(self, event_id: int) -> Optional[EventRow]:
        result = await self._session.execute(live_events().where(EventRow.event_id == event_id))
        return result.scalar_one_or_none()

    async def create(self, entity: Event) -> Outcome[Event]:
        """Insert the event. A new location row is created from ``entity.location`` when given."""

        async def work() -> Outcome[Event]:
            if await self._session.get(StatusRow, entity.status_id) is None:
                return Outcome.not_found(STATUS_NOT_FOUND)

            row = EventRow(
                title=entity.title,
                description=entity.description,
                start_time=to_store_datetime(entity.start_time),
                end_time=to_store_datetime(entity.end_time),
                family_friendly=entity.family_friendly,
                trash_collected=entity.trash_collected,
                number_of_attendees=entity.number_of_attendees,
                status_id=entity.status_id,
                is_deleted=False,
                version=1,
            )
            if entity.location is not None and not entity.location.location_id:
                row.location = LocationRow(
                    latitude=entity.location.latitude,
                    longitude=entity.location.longitude,
                )
            else:
                location_id = entity.location_id or (
                    entity.location.location_id if entity.location is not None else 0
                )
                if await self._session.get(LocationRow, location_id) is None:
                    return Outcome.not_found(LOCATION_NOT_FOUND)
                row.location_id = location_id

            self._session.add(row)
            await self._session.commit()
            created = await self._load(row.event_id)
            return Outcome.created(event_from_row(created))

        return await self._run("create", work, self._create_fault)

    async def get_all(self) -> Outcome[List[Event]]:
        async def work() -> Outcome[List[Event]]:
            result = await self._session.execute(live_events().order_by(EventRow.event_id))
            return Outcome.ok([event_from_row(row) for row in result.scalars().all()])

        return await self._run("get_all", work)

    async def get_by_id(self, event_id: int) -> Outcome[Event]:
        async def work() -> Outcome[Event]:
            row = await self._load(event_id)
            if row is None:
                return self._not_found(event_id)
            return Outcome.ok(event_from_row(row))

        return await self._run("get_by_id", work)

    async def update(self, entity: Event) -> Outcome[Event]:
        """
        Write the mutable fields that differ from the stored row. ``entity.version``
        is the version the caller saw; 0 means "the stored one". The soft-delete
        flag and the attendee counter are never written here.
        """

        async def work() -> Outcome[Event]:
            current = await self._load(entity.event_id)
            if current is None:
                return self._not_found(entity.event_id)

            if entity.status_id != current.status_id:
                if await self._session.get(StatusRow, entity.status_id) is None:
                    return Outcome.conflict(STATUS_NOT_FOUND)
            if entity.location_id != current.location_id:
                if await self._session.get(LocationRow, entity.location_id) is None:
                    return Outcome.conflict(LOCATION_NOT_FOUND)

            incoming = replace(
                entity,
                start_time=to_store_datetime(entity.start_time),
                end_time=to_store_datetime(entity.end_time),
            )
            patch = Patch.between(current, incoming, EVENT_MUTABLE_FIELDS)
            expected = entity.version or current.version
            if not patch:
                if expected != current.version:
                    return self._modified()
                return Outcome.ok(event_from_row(current))

            swapped = await self._compare_and_swap(
                EventRow,
                [EventRow.event_id == entity.event_id],
                expected,
                dict(patch.changes),
                live_only=True,
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(event_from_row(await self._load(entity.event_id)))

        return await self._run("update", work, self._update_fault)

    async def update_status(self, event_id: int, status_id: int) -> Outcome[Event]:
        """Write only ``status_id``. Any seeded status is accepted; setting the current one again is a no-op."""

        async def work() -> Outcome[Event]:
            current = await self._load(event_id)
            if current is None:
                return self._not_found(event_id)

            if status_id == current.status_id:
                return Outcome.ok(event_from_row(current))
            if await self._session.get(StatusRow, status_id) is None:
                return Outcome.conflict(STATUS_NOT_FOUND)

            swapped = await self._compare_and_swap(
                EventRow,
                [EventRow.event_id == event_id],
                current.version,
                {"status_id": status_id},
                live_only=True,
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(event_from_row(await self._load(event_id)))

        return await self._run("update_status", work, self._update_fault)

    async def delete(self, event_id: int) -> Outcome[Event]:
        """Soft delete. A second delete of the same event is NotFound."""

        async def work() -> Outcome[Event]:
            current = await self._load(event_id)
            if current is None:
                return self._not_found(event_id)

            swapped = await self._compare_and_swap(
                EventRow,
                [EventRow.event_id == event_id],
                current.version,
                {"is_deleted": True, "deleted_date": utcnow()},
                live_only=True,
            )
            conflict = await self._commit_or_conflict(swapped, self._delete_conflict())
            if conflict is not None:
                return conflict
            deleted = event_from_row(current)
            deleted.is_deleted = True
            deleted.version = current.version + 1
            return Outcome.ok(deleted)

        return await self._run("delete", work, self._delete_fault)
