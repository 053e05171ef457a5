"""DB-backed password reset tokens. A token is valid once, until it expires."""

import secrets
from datetime import timedelta
from typing import Optional

from sqlalchemy import select, update

from cleanups.core.outcome import Outcome
from cleanups.domain.models.base import utcnow
from cleanups.domain.models.user import PasswordResetToken
from cleanups.infrastructure.database.models import PasswordResetTokenRow, UserRow
from cleanups.infrastructure.database.repository import SqlRepository, to_store_datetime
from cleanups.infrastructure.database.row_mapping import token_from_row

INVALID_TOKEN = "Invalid token."
TOKEN_USED = "Token has already been used."
TOKEN_EXPIRED = "Token has expired."

DEFAULT_TOKEN_TTL = timedelta(minutes=60)


def new_token() -> str:
    """URL-safe random token, 64 characters."""
    return secrets.token_urlsafe(48)


class DbPasswordResetTokenRepository(SqlRepository):
    label = "PasswordResetToken"
    noun = "password reset token"

    def __init__(self, session, token_ttl: timedelta = DEFAULT_TOKEN_TTL, logger=None) -> None:
        super().__init__(session, logger)
        self._token_ttl = token_ttl

    async def _find(self, token: str) -> Optional[PasswordResetTokenRow]:
        stmt = (
            select(PasswordResetTokenRow)
            .where(PasswordResetTokenRow.token == token)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, entity: PasswordResetToken) -> Outcome[PasswordResetToken]:
        """
        Store a token for ``entity.user_id``. A random token is generated when
        ``entity.token`` is empty, and the expiry defaults to now + TTL.
        """

        async def work() -> Outcome[PasswordResetToken]:
            user = await self._session.execute(
                select(UserRow.user_id).where(
                    UserRow.user_id == entity.user_id, UserRow.is_deleted.is_(False)
                )
            )
            if user.first() is None:
                return Outcome.not_found("User with the specified ID does not exist.")

            now = utcnow()
            row = PasswordResetTokenRow(
                user_id=entity.user_id,
                token=entity.token or new_token(),
                expiration_date=to_store_datetime(entity.expiration_date) or now + self._token_ttl,
                is_used=False,
                created_date=now,
            )
            self._session.add(row)
            await self._session.commit()
            return Outcome.created(token_from_row(row))

        return await self._run("create", work, self._create_fault)

    async def get_by_token(self, token: str) -> Outcome[PasswordResetToken]:
        async def work() -> Outcome[PasswordResetToken]:
            if not token or not token.strip():
                return Outcome.bad_request("Token cannot be empty.")
            row = await self._find(token)
            if row is None:
                return Outcome.not_found(INVALID_TOKEN)
            if row.is_used:
                return Outcome.conflict(TOKEN_USED)
            if row.expiration_date < utcnow():
                return Outcome.conflict(TOKEN_EXPIRED)
            return Outcome.ok(token_from_row(row))

        return await self._run("get_by_token", work)

    async def mark_as_used(self, token_id: int) -> Outcome[bool]:
        """Flip ``is_used`` once. A second call is a Conflict."""

        async def work() -> Outcome[bool]:
            result = await self._session.execute(
                update(PasswordResetTokenRow)
                .where(
                    PasswordResetTokenRow.id == token_id,
                    PasswordResetTokenRow.is_used.is_(False),
                )
                .values(is_used=True)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 1:
                await self._session.commit()
                return Outcome.ok(True)

            await self._session.rollback()
            if await self._session.get(PasswordResetTokenRow, token_id) is None:
                return Outcome.not_found(INVALID_TOKEN)
            return Outcome.conflict(TOKEN_USED)

        return await self._run("mark_as_used", work, self._update_fault)
