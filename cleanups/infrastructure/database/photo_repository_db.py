"""DB-backed photo repository. Photos are removed with a hard, version-checked delete."""

from typing import List, Optional

from sqlalchemy import select

from cleanups.core.outcome import Outcome
from cleanups.domain.models.patch import Patch
from cleanups.domain.models.photo import PHOTO_MUTABLE_FIELDS, Photo
from cleanups.infrastructure.database.models import EventRow, PhotoRow
from cleanups.infrastructure.database.repository import SqlRepository
from cleanups.infrastructure.database.row_mapping import photo_from_row

EVENT_NOT_FOUND = "Event with the specified ID does not exist."


class DbPhotoRepository(SqlRepository):
    label = "Photo"
    noun = "photo"

    async def _load(self, photo_id: int) -> Optional[PhotoRow]:
        stmt = (
            select(PhotoRow)
            .where(PhotoRow.photo_id == photo_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _event_is_live(self, event_id: int) -> bool:
        stmt = select(EventRow.event_id).where(
            EventRow.event_id == event_id,
            EventRow.is_deleted.is_(False),
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def create(self, entity: Photo) -> Outcome[Photo]:
        async def work() -> Outcome[Photo]:
            if not await self._event_is_live(entity.event_id):
                return Outcome.not_found(EVENT_NOT_FOUND)

            row = PhotoRow(
                event_id=entity.event_id,
                photo_data=entity.photo_data,
                caption=entity.caption,
                version=1,
            )
            self._session.add(row)
            await self._session.commit()
            return Outcome.created(photo_from_row(row))

        return await self._run("create", work, self._create_fault)

    async def get_all(self) -> Outcome[List[Photo]]:
        async def work() -> Outcome[List[Photo]]:
            result = await self._session.execute(
                select(PhotoRow)
                .order_by(PhotoRow.photo_id)
                .execution_options(populate_existing=True)
            )
            return Outcome.ok([photo_from_row(row) for row in result.scalars().all()])

        return await self._run("get_all", work)

    async def get_by_id(self, photo_id: int) -> Outcome[Photo]:
        async def work() -> Outcome[Photo]:
            row = await self._load(photo_id)
            if row is None:
                return self._not_found(photo_id)
            return Outcome.ok(photo_from_row(row))

        return await self._run("get_by_id", work)

    async def get_photos_by_event_id(self, event_id: int) -> Outcome[List[Photo]]:
        async def work() -> Outcome[List[Photo]]:
            if not await self._event_is_live(event_id):
                return Outcome.not_found(EVENT_NOT_FOUND)
            result = await self._session.execute(
                select(PhotoRow)
                .where(PhotoRow.event_id == event_id)
                .order_by(PhotoRow.photo_id)
                .execution_options(populate_existing=True)
            )
            return Outcome.ok([photo_from_row(row) for row in result.scalars().all()])

        return await self._run("get_photos_by_event_id", work)

    async def update(self, entity: Photo) -> Outcome[Photo]:
        """Only the caption can change."""

        async def work() -> Outcome[Photo]:
            current = await self._load(entity.photo_id)
            if current is None:
                return self._not_found(entity.photo_id)

            patch = Patch.between(current, entity, PHOTO_MUTABLE_FIELDS)
            expected = entity.version or current.version
            if not patch:
                if expected != current.version:
                    return self._modified()
                return Outcome.ok(photo_from_row(current))

            swapped = await self._compare_and_swap(
                PhotoRow, [PhotoRow.photo_id == entity.photo_id], expected, dict(patch.changes)
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(photo_from_row(await self._load(entity.photo_id)))

        return await self._run("update", work, self._update_fault)

    async def delete(self, photo_id: int) -> Outcome[Photo]:
        async def work() -> Outcome[Photo]:
            current = await self._load(photo_id)
            if current is None:
                return self._not_found(photo_id)
            removed = photo_from_row(current)

            swapped = await self._delete_versioned(
                PhotoRow, [PhotoRow.photo_id == photo_id], current.version
            )
            conflict = await self._commit_or_conflict(swapped, self._delete_conflict())
            if conflict is not None:
                return conflict
            return Outcome.ok(removed)

        return await self._run("delete", work, self._delete_fault)
