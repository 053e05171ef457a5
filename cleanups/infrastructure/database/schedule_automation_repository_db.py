"""Scheduled maintenance: event status roll-forward and the nightly purge of soft-deleted rows.

Both operations report success as a bool and log what happened; failures are
logged and rolled back, never raised.
"""

import logging
from datetime import timedelta
from typing import Optional, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cleanups.domain.models.base import utcnow
from cleanups.domain.models.event import EventStatus
from cleanups.infrastructure.database.models import (
    EventAttendanceRow,
    EventRow,
    PasswordResetTokenRow,
    PhotoRow,
    UserRow,
)

DEFAULT_RETENTION = timedelta(days=30)


class DbScheduleAutomationRepository:
    def __init__(
        self,
        session: AsyncSession,
        retention: timedelta = DEFAULT_RETENTION,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._session = session
        self._retention = retention
        self._logger = logger or logging.getLogger(__name__)

    async def run_nightly_cleanup(self) -> bool:
        """
        Hard-delete events and users soft-deleted longer ago than the retention window,
        with their attendances, photos and reset tokens. Surviving events that lose
        attendance rows get ``number_of_attendees`` recounted from their live attendees.
        """
        self._logger.info("nightly_cleanup_started", extra={"retention_days": self._retention.days})
        cutoff = utcnow() - self._retention
        try:
            old_events = select(EventRow.event_id).where(
                EventRow.is_deleted.is_(True), EventRow.deleted_date < cutoff
            )
            old_users = select(UserRow.user_id).where(
                UserRow.is_deleted.is_(True), UserRow.deleted_date < cutoff
            )
            touched = (
                await self._session.execute(
                    select(EventAttendanceRow.event_id)
                    .where(
                        EventAttendanceRow.user_id.in_(old_users),
                        EventAttendanceRow.event_id.not_in(old_events),
                    )
                    .distinct()
                )
            ).scalars().all()

            attendances = await self._session.execute(
                delete(EventAttendanceRow)
                .where(
                    EventAttendanceRow.event_id.in_(old_events)
                    | EventAttendanceRow.user_id.in_(old_users)
                )
                .execution_options(synchronize_session=False)
            )
            if touched:
                await self._recount_attendees(touched)
            photos = await self._session.execute(
                delete(PhotoRow)
                .where(PhotoRow.event_id.in_(old_events))
                .execution_options(synchronize_session=False)
            )
            tokens = await self._session.execute(
                delete(PasswordResetTokenRow)
                .where(PasswordResetTokenRow.user_id.in_(old_users))
                .execution_options(synchronize_session=False)
            )
            events = await self._session.execute(
                delete(EventRow)
                .where(EventRow.is_deleted.is_(True), EventRow.deleted_date < cutoff)
                .execution_options(synchronize_session=False)
            )
            users = await self._session.execute(
                delete(UserRow)
                .where(UserRow.is_deleted.is_(True), UserRow.deleted_date < cutoff)
                .execution_options(synchronize_session=False)
            )
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            self._logger.exception("nightly_cleanup_failed")
            return False

        self._logger.info(
            "nightly_cleanup_completed",
            extra={
                "events_deleted": events.rowcount,
                "users_deleted": users.rowcount,
                "attendances_deleted": attendances.rowcount,
                "photos_deleted": photos.rowcount,
                "tokens_deleted": tokens.rowcount,
                "events_recounted": len(touched),
            },
        )
        return True

    async def _recount_attendees(self, event_ids: Sequence[int]) -> None:
        live_attendees = (
            select(func.count())
            .select_from(EventAttendanceRow)
            .join(UserRow, UserRow.user_id == EventAttendanceRow.user_id)
            .where(
                EventAttendanceRow.event_id == EventRow.event_id,
                UserRow.is_deleted.is_(False),
            )
            .scalar_subquery()
        )
        await self._session.execute(
            update(EventRow)
            .where(EventRow.event_id.in_(event_ids))
            .values(number_of_attendees=live_attendees)
            .execution_options(synchronize_session=False)
        )

    async def run_status_update(self) -> bool:
        """Upcoming -> Ongoing once started; Upcoming/Ongoing -> Completed once ended."""
        self._logger.info("status_update_started")
        now = utcnow()
        try:
            completed = await self._session.execute(
                update(EventRow)
                .where(
                    EventRow.is_deleted.is_(False),
                    EventRow.status_id.in_(
                        [EventStatus.UPCOMING.value, EventStatus.ONGOING.value]
                    ),
                    EventRow.end_time <= now,
                )
                .values(status_id=EventStatus.COMPLETED.value, version=EventRow.version + 1)
                .execution_options(synchronize_session=False)
            )
            started = await self._session.execute(
                update(EventRow)
                .where(
                    EventRow.is_deleted.is_(False),
                    EventRow.status_id == EventStatus.UPCOMING.value,
                    EventRow.start_time <= now,
                    EventRow.end_time > now,
                )
                .values(status_id=EventStatus.ONGOING.value, version=EventRow.version + 1)
                .execution_options(synchronize_session=False)
            )
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            self._logger.exception("status_update_failed")
            return False

        self._logger.info(
            "status_update_completed",
            extra={"events_started": started.rowcount, "events_completed": completed.rowcount},
        )
        return True
