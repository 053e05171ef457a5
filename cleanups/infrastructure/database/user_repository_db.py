"""DB-backed user repository. Users are soft deleted; email uniqueness covers deleted rows too."""

from typing import List, Optional

from sqlalchemy import select, update

from cleanups.core.outcome import Outcome
from cleanups.domain.models.base import utcnow
from cleanups.domain.models.patch import Patch
from cleanups.domain.models.user import USER_MUTABLE_FIELDS, User
from cleanups.infrastructure.database.errors import CONSTRAINT_HINTS
from cleanups.infrastructure.database.models import EventAttendanceRow, EventRow, RoleRow, UserRow
from cleanups.infrastructure.database.repository import SqlRepository
from cleanups.infrastructure.database.row_mapping import user_from_row

EMAIL_TAKEN = CONSTRAINT_HINTS["uq_users_email"]


def live_users():
    return (
        select(UserRow)
        .where(UserRow.is_deleted.is_(False))
        .execution_options(populate_existing=True)
    )


class DbUserRepository(SqlRepository):
    label = "User"
    noun = "user"

    async def _load(self, user_id: int) -> Optional[UserRow]:
        result = await self._session.execute(live_users().where(UserRow.user_id == user_id))
        return result.scalar_one_or_none()

    async def _email_taken(self, email: str, exclude_user_id: Optional[int] = None) -> bool:
        # Deleted rows still hold their email in the unique index.
        stmt = select(UserRow.user_id).where(UserRow.email == email)
        if exclude_user_id is not None:
            stmt = stmt.where(UserRow.user_id != exclude_user_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def _release_attendances(self, user_id: int) -> None:
        attended = select(EventAttendanceRow.event_id).where(EventAttendanceRow.user_id == user_id)
        await self._session.execute(
            update(EventRow)
            .where(EventRow.event_id.in_(attended))
            .values(number_of_attendees=EventRow.number_of_attendees - 1)
            .execution_options(synchronize_session=False)
        )

    async def create(self, entity: User) -> Outcome[User]:
        async def work() -> Outcome[User]:
            if await self._session.get(RoleRow, entity.role_id) is None:
                return Outcome.not_found(CONSTRAINT_HINTS["fk_users_role"])
            if await self._email_taken(entity.email):
                return Outcome.conflict(EMAIL_TAKEN)

            row = UserRow(
                name=entity.name,
                email=entity.email,
                password_hash=entity.password_hash,
                role_id=entity.role_id,
                created_date=utcnow(),
                is_deleted=False,
                version=1,
            )
            self._session.add(row)
            await self._session.commit()
            return Outcome.created(user_from_row(row))

        return await self._run("create", work, self._create_fault)

    async def get_all(self) -> Outcome[List[User]]:
        async def work() -> Outcome[List[User]]:
            result = await self._session.execute(live_users().order_by(UserRow.user_id))
            return Outcome.ok([user_from_row(row) for row in result.scalars().all()])

        return await self._run("get_all", work)

    async def get_by_id(self, user_id: int) -> Outcome[User]:
        async def work() -> Outcome[User]:
            row = await self._load(user_id)
            if row is None:
                return self._not_found(user_id)
            return Outcome.ok(user_from_row(row))

        return await self._run("get_by_id", work)

    async def get_by_email(self, email: str) -> Outcome[User]:
        async def work() -> Outcome[User]:
            result = await self._session.execute(live_users().where(UserRow.email == email))
            row = result.scalar_one_or_none()
            if row is None:
                return Outcome.not_found(f"User with email: {email} does not exist")
            return Outcome.ok(user_from_row(row))

        return await self._run("get_by_email", work)

    async def update(self, entity: User) -> Outcome[User]:
        """Write changed ``name``/``email``. Password, role and soft-delete flag are untouched."""

        async def work() -> Outcome[User]:
            current = await self._load(entity.user_id)
            if current is None:
                return self._not_found(entity.user_id)

            patch = Patch.between(current, entity, USER_MUTABLE_FIELDS)
            expected = entity.version or current.version
            if not patch:
                if expected != current.version:
                    return self._modified()
                return Outcome.ok(user_from_row(current))
            if "email" in patch and await self._email_taken(entity.email, entity.user_id):
                return Outcome.conflict(EMAIL_TAKEN)

            swapped = await self._compare_and_swap(
                UserRow,
                [UserRow.user_id == entity.user_id],
                expected,
                dict(patch.changes),
                live_only=True,
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(user_from_row(await self._load(entity.user_id)))

        return await self._run("update", work, self._update_fault)

    async def update_password(self, user_id: int, password_hash: str) -> Outcome[bool]:
        async def work() -> Outcome[bool]:
            current = await self._load(user_id)
            if current is None:
                return self._not_found(user_id)

            swapped = await self._compare_and_swap(
                UserRow,
                [UserRow.user_id == user_id],
                current.version,
                {"password_hash": password_hash},
                live_only=True,
            )
            conflict = await self._commit_or_conflict(swapped, self._modified())
            if conflict is not None:
                return conflict
            return Outcome.ok(True)

        return await self._run("update_password", work, self._update_fault)

    async def delete(self, user_id: int) -> Outcome[User]:
        """
        Soft delete. The user's attendances stay but are hidden from event reads,
        so each attended event's ``number_of_attendees`` drops by one in the same
        transaction.
        """

        async def work() -> Outcome[User]:
            current = await self._load(user_id)
            if current is None:
                return self._not_found(user_id)

            swapped = await self._compare_and_swap(
                UserRow,
                [UserRow.user_id == user_id],
                current.version,
                {"is_deleted": True, "deleted_date": utcnow()},
                live_only=True,
            )
            if swapped:
                await self._release_attendances(user_id)
            conflict = await self._commit_or_conflict(swapped, self._delete_conflict())
            if conflict is not None:
                return conflict
            deleted = user_from_row(current)
            deleted.is_deleted = True
            deleted.version = current.version + 1
            return Outcome.ok(deleted)

        return await self._run("delete", work, self._delete_fault)
