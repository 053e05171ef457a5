"""Validation rules for event requests. First violated rule wins."""

from decimal import Decimal
from typing import Optional

from cleanups.core.outcome import Outcome
from cleanups.domain.models.event import EventStatus
from cleanups.domain.schemas.event import (
    CreateEventRequest,
    UpdateEventRequest,
    UpdateEventStatusRequest,
)
from cleanups.domain.validators.common import (
    VALID,
    is_blank,
    is_positive_id,
    same_tz_awareness,
    validate_id,
    validate_version,
)

TITLE_MAX_LENGTH = 200
LATITUDE_RANGE = (Decimal("-90"), Decimal("90"))
LONGITUDE_RANGE = (Decimal("-180"), Decimal("180"))

_KNOWN_STATUSES = frozenset(s.value for s in EventStatus)


def _is_known_status(value: Optional[int]) -> bool:
    return is_positive_id(value) and value in _KNOWN_STATUSES


class EventValidator:
    def validate_for_create(self, request: Optional[CreateEventRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Event cannot be null.")
        failure = self._validate_text_and_schedule(request)
        if failure is not None:
            return failure
        location = request.location
        if location is None:
            return Outcome.bad_request("Location is required.")
        low, high = LATITUDE_RANGE
        if location.latitude is None or not low <= location.latitude <= high:
            return Outcome.bad_request("Latitude must be between -90 and 90.")
        low, high = LONGITUDE_RANGE
        if location.longitude is None or not low <= location.longitude <= high:
            return Outcome.bad_request("Longitude must be between -180 and 180.")
        return VALID

    def validate_for_update(self, request: Optional[UpdateEventRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Event cannot be null.")
        if not is_positive_id(request.event_id):
            return Outcome.bad_request("Event Id must be greater than zero.")
        failure = self._validate_text_and_schedule(request)
        if failure is not None:
            return failure
        if request.trash_collected is None:
            return Outcome.bad_request("Trash collected is required.")
        if request.trash_collected < 0:
            return Outcome.bad_request("Trash collected cannot be negative.")
        if not _is_known_status(request.status):
            return Outcome.bad_request("Status is not valid.")
        if not is_positive_id(request.location_id):
            return Outcome.bad_request("Location Id must be greater than zero.")
        return validate_version(request.version) or VALID

    def validate_for_status_update(
        self, request: Optional[UpdateEventStatusRequest]
    ) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Status update cannot be null.")
        if not is_positive_id(request.event_id):
            return Outcome.bad_request("Event Id must be greater than zero.")
        if not _is_known_status(request.new_status):
            return Outcome.bad_request("Status is not valid.")
        return VALID

    def validate_id(self, event_id: int) -> Outcome[bool]:
        return validate_id(event_id, "Event Id")

    @staticmethod
    def _validate_text_and_schedule(request) -> Optional[Outcome[bool]]:
        if is_blank(request.title):
            return Outcome.bad_request("Title is required.")
        if len(request.title) > TITLE_MAX_LENGTH:
            return Outcome.bad_request(f"Title cannot exceed {TITLE_MAX_LENGTH} characters.")
        if is_blank(request.description):
            return Outcome.bad_request("Description is required.")
        if request.start_time is None:
            return Outcome.bad_request("Start time is required.")
        if request.end_time is None:
            return Outcome.bad_request("End time is required.")
        if not same_tz_awareness(request.start_time, request.end_time):
            return Outcome.bad_request(
                "Start time and end time must both include or both omit a timezone."
            )
        if request.end_time <= request.start_time:
            return Outcome.bad_request("End time must be after start time.")
        return None
