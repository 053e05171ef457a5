"""Repository protocols. Application layer depends on these; infrastructure implements them.

Every method returns an ``Outcome``. Implementations catch store exceptions and
report them as status-coded failures; nothing raises across this boundary.
"""

from typing import List, Protocol

from cleanups.core.outcome import Outcome
from cleanups.domain.models.base import EntityT
from cleanups.domain.models.event import Event
from cleanups.domain.models.event_attendance import EventAttendance
from cleanups.domain.models.photo import Photo
from cleanups.domain.models.user import PasswordResetToken, User


class CrudRepository(Protocol[EntityT]):
    """Operations shared by the entities keyed by a single integer id."""

    async def create(self, entity: EntityT) -> Outcome[EntityT]:
        ...

    async def get_all(self) -> Outcome[List[EntityT]]:
        """Live rows only. No rows is ``ok([])``."""
        ...

    async def get_by_id(self, entity_id: int) -> Outcome[EntityT]:
        ...

    async def update(self, entity: EntityT) -> Outcome[EntityT]:
        """Write the changed mutable fields in one compare-and-swap statement."""
        ...

    async def delete(self, entity_id: int) -> Outcome[EntityT]:
        ...


class EventRepository(CrudRepository[Event], Protocol):
    """
    ``create`` inserts the event together with its location; ``delete`` is a
    soft delete returning the flagged entity. Reads strip attendances of
    soft-deleted users.
    """

    async def update_status(self, event_id: int, status_id: int) -> Outcome[Event]:
        ...


class EventAttendanceRepository(Protocol):
    async def create(self, entity: EventAttendance) -> Outcome[EventAttendance]:
        ...

    async def get_all(self) -> Outcome[List[EventAttendance]]:
        ...

    async def get_by_ids(self, event_id: int, user_id: int) -> Outcome[EventAttendance]:
        ...

    async def get_events_by_user_id(self, user_id: int) -> Outcome[List[Event]]:
        ...

    async def get_users_by_event_id(self, event_id: int) -> Outcome[List[User]]:
        ...

    async def update(self, entity: EventAttendance) -> Outcome[EventAttendance]:
        ...

    async def delete(self, event_id: int, user_id: int) -> Outcome[EventAttendance]:
        """Hard delete. Returns the removed row."""
        ...


class PhotoRepository(CrudRepository[Photo], Protocol):
    """``delete`` is a hard delete returning the removed row."""

    async def get_photos_by_event_id(self, event_id: int) -> Outcome[List[Photo]]:
        ...


class UserRepository(CrudRepository[User], Protocol):
    """``create`` expects ``password_hash`` to be hashed already; ``delete`` is a soft delete."""

    async def get_by_email(self, email: str) -> Outcome[User]:
        ...

    async def update_password(self, user_id: int, password_hash: str) -> Outcome[bool]:
        ...


class PasswordResetTokenRepository(Protocol):
    async def create(self, entity: PasswordResetToken) -> Outcome[PasswordResetToken]:
        ...

    async def get_by_token(self, token: str) -> Outcome[PasswordResetToken]:
        """NotFound if unknown; Conflict if already used or expired."""
        ...

    async def mark_as_used(self, token_id: int) -> Outcome[bool]:
        ...


class ScheduleAutomationRepository(Protocol):
    async def run_nightly_cleanup(self) -> bool:
        ...

    async def run_status_update(self) -> bool:
        ...
