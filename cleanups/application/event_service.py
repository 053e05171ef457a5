"""Event application service. Validates, maps and delegates to the event repository."""

import logging
from typing import List, Optional

from cleanups.application.outcome_log import log_outcome
from cleanups.application.repositories import EventRepository
from cleanups.core.outcome import Outcome
from cleanups.domain.mappers.event_mapper import EventMapper
from cleanups.domain.schemas.event import (
    CreateEventRequest,
    EventResponse,
    UpdateEventRequest,
    UpdateEventStatusRequest,
)
from cleanups.domain.validators.event_validator import EventValidator


class EventService:
    """
    Orchestration only. No HTTP, no session handling, no exception handling:
    validator failures are returned unchanged and repository outcomes are only
    transformed into responses, never reinterpreted.
    """

    def __init__(
        self,
        repository: EventRepository,
        validator: EventValidator,
        mapper: EventMapper,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._mapper = mapper
        self._logger = logger or logging.getLogger(__name__)

    async def create(self, request: Optional[CreateEventRequest]) -> Outcome[EventResponse]:
        validation = self._validator.validate_for_create(request)
        if not validation.is_success:
            log_outcome(self._logger, "event_create", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.create(entity)).transform(self._mapper.to_response)
        log_outcome(
            self._logger,
            "event_create",
            outcome,
            event_id=outcome.value.event_id if outcome.value else None,
        )
        return outcome

    async def get_all(self) -> Outcome[List[EventResponse]]:
        outcome = (await self._repository.get_all()).transform(self._mapper.to_response_list)
        log_outcome(self._logger, "event_get_all", outcome)
        return outcome

    async def get_by_id(self, event_id: int) -> Outcome[EventResponse]:
        validation = self._validator.validate_id(event_id)
        if not validation.is_success:
            log_outcome(self._logger, "event_get_by_id", validation, event_id=event_id)
            return validation.forward()

        outcome = (await self._repository.get_by_id(event_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "event_get_by_id", outcome, event_id=event_id)
        return outcome

    async def update(self, request: Optional[UpdateEventRequest]) -> Outcome[EventResponse]:
        validation = self._validator.validate_for_update(request)
        if not validation.is_success:
            log_outcome(self._logger, "event_update", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.update(entity)).transform(self._mapper.to_response)
        log_outcome(self._logger, "event_update", outcome, event_id=entity.event_id)
        return outcome

    async def delete(self, event_id: int) -> Outcome[EventResponse]:
        validation = self._validator.validate_id(event_id)
        if not validation.is_success:
            log_outcome(self._logger, "event_delete", validation, event_id=event_id)
            return validation.forward()

        outcome = (await self._repository.delete(event_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "event_delete", outcome, event_id=event_id)
        return outcome

    async def update_status(
        self, request: Optional[UpdateEventStatusRequest]
    ) -> Outcome[EventResponse]:
        """Move an event to ``request.new_status``. An unknown status comes back as Conflict."""
        validation = self._validator.validate_for_status_update(request)
        if not validation.is_success:
            log_outcome(self._logger, "event_update_status", validation)
            return validation.forward()

        outcome = (
            await self._repository.update_status(request.event_id, request.new_status)
        ).transform(self._mapper.to_response)
        log_outcome(
            self._logger,
            "event_update_status",
            outcome,
            event_id=request.event_id,
            new_status=request.new_status,
        )
        return outcome
