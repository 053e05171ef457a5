"""Conversion between event attendance shapes and the EventAttendance entity."""

from typing import List, Union

from cleanups.domain.mappers.base import map_responses
from cleanups.domain.models.event_attendance import EventAttendance
from cleanups.domain.schemas.event_attendance import (
    CreateEventAttendanceRequest,
    EventAttendanceResponse,
    UpdateEventAttendanceRequest,
)

AttendanceSource = Union[
    CreateEventAttendanceRequest, UpdateEventAttendanceRequest, EventAttendanceResponse
]


class EventAttendanceMapper:
    """
    Create requests leave ``check_in`` and ``created_date`` unset (the store
    stamps ``created_date``). Update requests without a version map to the
    default version; the repository then uses the stored one.
    """

    def to_entity(self, source: AttendanceSource) -> EventAttendance:
        if isinstance(source, CreateEventAttendanceRequest):
            return EventAttendance(event_id=source.event_id, user_id=source.user_id)
        if isinstance(source, UpdateEventAttendanceRequest):
            return EventAttendance(
                event_id=source.event_id,
                user_id=source.user_id,
                check_in=source.check_in,
                version=source.version or 0,
            )
        return EventAttendance(
            event_id=source.event_id,
            user_id=source.user_id,
            check_in=source.check_in,
            created_date=source.created_date,
            version=source.version,
        )

    def to_response(self, entity: EventAttendance) -> EventAttendanceResponse:
        return EventAttendanceResponse(
            event_id=entity.event_id,
            user_id=entity.user_id,
            check_in=entity.check_in,
            created_date=entity.created_date,
            version=entity.version,
        )

    def to_entity_list(self, sources: List[AttendanceSource]) -> List[EventAttendance]:
        return [self.to_entity(s) for s in sources]

    def to_response_list(self, entities: List[EventAttendance]) -> List[EventAttendanceResponse]:
        return map_responses(self.to_response, entities)
