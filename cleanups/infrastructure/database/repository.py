# cleanups/infrastructure/database/repository.py

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from cleanups.core.outcome import Outcome
from cleanups.infrastructure.database.errors import FaultKind, StoreFault, classify

T = TypeVar("T")

GENERIC_FAILURE = "Something went wrong. Try again later"
CANCELED_FAILURE = "Operation Canceled. Refresh and retry"

FaultMapper = Callable[[StoreFault], Optional[Outcome[Any]]]


def to_store_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class SqlRepository:
    """
    Base for the store-backed repositories. Subclasses set ``label`` (used in
    messages, e.g. "Photo") and ``noun`` (lower-case form, e.g. "photo").

    Every public repository method runs its body through ``_run``: store
    exceptions are classified, logged and turned into an ``Outcome``, and the
    session is rolled back. Nothing raises out of a repository.
    """

    label = "Entity"
    noun = "entity"

    def __init__(self, session: AsyncSession, logger: Optional[logging.Logger] = None) -> None:
        self._session = session
        self._logger = logger or logging.getLogger(type(self).__module__)

    async def _run(
        self,
        operation: str,
        work: Callable[[], Awaitable[Outcome[T]]],
        on_fault: Optional[FaultMapper] = None,
    ) -> Outcome[T]:
        try:
            return await work()
        except (asyncio.CancelledError, Exception) as exc:
            await self._rollback(operation)
            fault = classify(exc)
            self._logger.error(
                "store_failure",
                extra={
                    "repository": type(self).__name__,
                    "operation": operation,
                    "fault": fault.kind.value,
                    "constraint": fault.constraint,
                    "error_type": type(exc).__name__,
                },
                exc_info=fault.kind is FaultKind.OTHER,
            )
            if fault.kind in (FaultKind.CANCELLED, FaultKind.TIMEOUT):
                return Outcome.internal_server_error(CANCELED_FAILURE)
            mapped = on_fault(fault) if on_fault is not None and fault.kind is not FaultKind.OTHER else None
            return mapped if mapped is not None else Outcome.internal_server_error(GENERIC_FAILURE)

    async def _rollback(self, operation: str) -> None:
        try:
            await self._session.rollback()
        except Exception:
            self._logger.exception(
                "rollback_failed",
                extra={"repository": type(self).__name__, "operation": operation},
            )

    # --- fault mapping per operation ---

    def _create_fault(self, fault: StoreFault) -> Optional[Outcome[Any]]:
        if fault.kind is FaultKind.UNIQUE:
            return Outcome.conflict(fault.hint or f"{self.label} already exists.")
        return Outcome.internal_server_error(
            fault.hint
            or f"Failed to create the {self.noun} due to a database error. Try again later"
        )

    def _update_fault(self, fault: StoreFault) -> Optional[Outcome[Any]]:
        if fault.kind is FaultKind.FOREIGN_KEY:
            return Outcome.conflict(
                fault.hint or f"The {self.noun} references a row that does not exist."
            )
        if fault.kind is FaultKind.UNIQUE:
            return Outcome.conflict(fault.hint or f"{self.label} conflicts with an existing row.")
        if fault.kind is FaultKind.CHECK:
            return Outcome.bad_request(fault.hint or f"The {self.noun} has an invalid value.")
        return Outcome.internal_server_error(
            f"Failed to update the {self.noun} due to a database error. Try again later"
        )

    def _delete_fault(self, fault: StoreFault) -> Optional[Outcome[Any]]:
        if fault.kind is FaultKind.FOREIGN_KEY:
            return Outcome.conflict(
                fault.hint or f"The {self.noun} is still referenced and cannot be deleted."
            )
        return Outcome.internal_server_error(
            f"Failed to delete the {self.noun} due to a database error. Try again later"
        )

    # --- common outcomes ---

    def _not_found(self, key: Any) -> Outcome[Any]:
        return Outcome.not_found(f"{self.label} with id: {key} does not exist")

    def _modified(self) -> Outcome[Any]:
        return Outcome.conflict(f"{self.label} was modified by another user. Refresh and retry")

    def _delete_conflict(self) -> Outcome[Any]:
        return Outcome.conflict(
            f"Concurrency issue while deleting the {self.noun}. Please refresh and try again."
        )

    # --- compare-and-swap writes ---

    async def _compare_and_swap(
        self,
        model: Any,
        key: Iterable[Any],
        expected_version: int,
        values: Dict[str, Any],
        live_only: bool = False,
    ) -> bool:
        """
        ``UPDATE model SET values, version = version + 1 WHERE key AND version = expected``.
        Returns False when no row matched (stale version, or row gone).
        """
        stmt = (
            update(model)
            .where(*key, model.version == expected_version)
            .values(**values, version=model.version + 1)
            .execution_options(synchronize_session=False)
        )
        if live_only:
            stmt = stmt.where(model.is_deleted.is_(False))
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def _delete_versioned(self, model: Any, key: Iterable[Any], expected_version: int) -> bool:
        stmt = (
            delete(model)
            .where(*key, model.version == expected_version)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def _commit_or_conflict(self, swapped: bool, conflict: Outcome[Any]) -> Optional[Outcome[Any]]:
        """Commit a successful swap; roll back and return ``conflict`` otherwise."""
        if not swapped:
            await self._session.rollback()
            return conflict
        await self._session.commit()
        return None
