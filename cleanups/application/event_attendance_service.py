"""Event attendance application service.

Attendance rows are keyed by the (event, user) pair. Besides CRUD the service
answers the two membership queries: the events a user attends and the users
attending an event.
"""

import logging
from typing import List, Optional

from cleanups.application.outcome_log import log_outcome
from cleanups.application.repositories import EventAttendanceRepository
from cleanups.core.outcome import Outcome
from cleanups.domain.mappers.event_attendance_mapper import EventAttendanceMapper
from cleanups.domain.mappers.event_mapper import EventMapper
from cleanups.domain.mappers.user_mapper import UserMapper
from cleanups.domain.schemas.event import EventResponse
from cleanups.domain.schemas.event_attendance import (
    CreateEventAttendanceRequest,
    EventAttendanceResponse,
    UpdateEventAttendanceRequest,
)
from cleanups.domain.schemas.user import UserResponse
from cleanups.domain.validators.event_attendance_validator import EventAttendanceValidator


class EventAttendanceService:
    def __init__(
        self,
        repository: EventAttendanceRepository,
        validator: EventAttendanceValidator,
        mapper: EventAttendanceMapper,
        event_mapper: Optional[EventMapper] = None,
        user_mapper: Optional[UserMapper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._mapper = mapper
        self._event_mapper = event_mapper or EventMapper(attendance_mapper=mapper)
        self._user_mapper = user_mapper or UserMapper()
        self._logger = logger or logging.getLogger(__name__)

    async def create(
        self, request: Optional[CreateEventAttendanceRequest]
    ) -> Outcome[EventAttendanceResponse]:
        validation = self._validator.validate_for_create(request)
        if not validation.is_success:
            log_outcome(self._logger, "attendance_create", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.create(entity)).transform(self._mapper.to_response)
        log_outcome(
            self._logger,
            "attendance_create",
            outcome,
            event_id=entity.event_id,
            user_id=entity.user_id,
        )
        return outcome

    async def get_all(self) -> Outcome[List[EventAttendanceResponse]]:
        outcome = (await self._repository.get_all()).transform(self._mapper.to_response_list)
        log_outcome(self._logger, "attendance_get_all", outcome)
        return outcome

    async def get_by_ids(self, event_id: int, user_id: int) -> Outcome[EventAttendanceResponse]:
        validation = self._validator.validate_ids(event_id, user_id)
        if not validation.is_success:
            log_outcome(
                self._logger, "attendance_get_by_ids", validation, event_id=event_id, user_id=user_id
            )
            return validation.forward()

        outcome = (await self._repository.get_by_ids(event_id, user_id)).transform(
            self._mapper.to_response
        )
        log_outcome(
            self._logger, "attendance_get_by_ids", outcome, event_id=event_id, user_id=user_id
        )
        return outcome

    async def get_events_by_user_id(self, user_id: int) -> Outcome[List[EventResponse]]:
        validation = self._validator.validate_user_id(user_id)
        if not validation.is_success:
            log_outcome(self._logger, "attendance_events_by_user", validation, user_id=user_id)
            return validation.forward()

        outcome = (await self._repository.get_events_by_user_id(user_id)).transform(
            self._event_mapper.to_response_list
        )
        log_outcome(self._logger, "attendance_events_by_user", outcome, user_id=user_id)
        return outcome

    async def get_users_by_event_id(self, event_id: int) -> Outcome[List[UserResponse]]:
        validation = self._validator.validate_event_id(event_id)
        if not validation.is_success:
            log_outcome(self._logger, "attendance_users_by_event", validation, event_id=event_id)
            return validation.forward()

        outcome = (await self._repository.get_users_by_event_id(event_id)).transform(
            self._user_mapper.to_response_list
        )
        log_outcome(self._logger, "attendance_users_by_event", outcome, event_id=event_id)
        return outcome

    async def update(
        self, request: Optional[UpdateEventAttendanceRequest]
    ) -> Outcome[EventAttendanceResponse]:
        """Record the check-in time of an attendee."""
        validation = self._validator.validate_for_update(request)
        if not validation.is_success:
            log_outcome(self._logger, "attendance_update", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.update(entity)).transform(self._mapper.to_response)
        log_outcome(
            self._logger,
            "attendance_update",
            outcome,
            event_id=entity.event_id,
            user_id=entity.user_id,
        )
        return outcome

    async def delete(self, event_id: int, user_id: int) -> Outcome[EventAttendanceResponse]:
        validation = self._validator.validate_ids(event_id, user_id)
        if not validation.is_success:
            log_outcome(
                self._logger, "attendance_delete", validation, event_id=event_id, user_id=user_id
            )
            return validation.forward()

        outcome = (await self._repository.delete(event_id, user_id)).transform(
            self._mapper.to_response
        )
        log_outcome(self._logger, "attendance_delete", outcome, event_id=event_id, user_id=user_id)
        return outcome
