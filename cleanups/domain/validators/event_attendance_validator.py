"""Validation rules for event attendance. Identity is the (event, user) pair."""

from typing import Optional

from cleanups.core.outcome import Outcome
from cleanups.domain.schemas.event_attendance import (
    CreateEventAttendanceRequest,
    UpdateEventAttendanceRequest,
)
from cleanups.domain.validators.common import VALID, validate_id, validate_version


class EventAttendanceValidator:
    def validate_for_create(
        self, request: Optional[CreateEventAttendanceRequest]
    ) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("EventAttendance cannot be null.")
        return self.validate_ids(request.event_id, request.user_id)

    def validate_for_update(
        self, request: Optional[UpdateEventAttendanceRequest]
    ) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("EventAttendance cannot be null.")
        ids = self.validate_ids(request.event_id, request.user_id)
        if not ids.is_success:
            return ids
        if request.check_in is None:
            return Outcome.bad_request("Check In time is required.")
        return validate_version(request.version) or VALID

    def validate_ids(self, event_id: int, user_id: int) -> Outcome[bool]:
        event_check = validate_id(event_id, "Event Id")
        if not event_check.is_success:
            return event_check
        return validate_id(user_id, "User Id")

    def validate_id(self, id_: int) -> Outcome[bool]:
        return validate_id(id_, "Id")

    def validate_event_id(self, event_id: int) -> Outcome[bool]:
        return validate_id(event_id, "Event Id")

    def validate_user_id(self, user_id: int) -> Outcome[bool]:
        return validate_id(user_id, "User Id")
