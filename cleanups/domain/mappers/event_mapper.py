"""Conversion between event shapes and the Event entity.

Nested attendances and photos go through their own mappers. The mapper does
not load anything: an entity's ``location`` must already be populated before
``to_response`` is called.
"""

from typing import List, Optional, Union

from cleanups.domain.mappers.base import map_responses
from cleanups.domain.mappers.event_attendance_mapper import EventAttendanceMapper
from cleanups.domain.mappers.photo_mapper import PhotoMapper
from cleanups.domain.models.event import Event, EventStatus, Location, Status
from cleanups.domain.schemas.event import CreateEventRequest, EventResponse, UpdateEventRequest
from cleanups.domain.schemas.location import LocationResponse

EventSource = Union[CreateEventRequest, UpdateEventRequest, EventResponse]


class EventMapper:
    """
    Defaults per source:
    - create: trash 0, attendees 0, status Upcoming, location id 0 (assigned on insert)
    - update: attendees 0, no nested collections; version 0 means "use the stored one"
    - response: ``is_deleted`` False; status name recomputed from the enum
    """

    def __init__(
        self,
        attendance_mapper: Optional[EventAttendanceMapper] = None,
        photo_mapper: Optional[PhotoMapper] = None,
    ) -> None:
        self._attendance_mapper = attendance_mapper or EventAttendanceMapper()
        self._photo_mapper = photo_mapper or PhotoMapper()

    def to_entity(self, source: EventSource) -> Event:
        if isinstance(source, CreateEventRequest):
            location = Location(
                latitude=source.location.latitude,
                longitude=source.location.longitude,
            )
            return Event(
                title=source.title,
                description=source.description,
                start_time=source.start_time,
                end_time=source.end_time,
                family_friendly=source.family_friendly,
                status_id=EventStatus.UPCOMING.value,
                status=_status(EventStatus.UPCOMING),
                location=location,
            )
        if isinstance(source, UpdateEventRequest):
            return Event(
                event_id=source.event_id,
                title=source.title,
                description=source.description,
                start_time=source.start_time,
                end_time=source.end_time,
                family_friendly=source.family_friendly,
                trash_collected=source.trash_collected,
                status_id=source.status,
                location_id=source.location_id,
                version=source.version or 0,
            )
        return Event(
            event_id=source.event_id,
            title=source.title,
            description=source.description,
            start_time=source.start_time,
            end_time=source.end_time,
            family_friendly=source.family_friendly,
            trash_collected=source.trash_collected,
            number_of_attendees=source.number_of_attendees,
            status_id=source.status.value,
            location_id=source.location.location_id,
            version=source.version,
            status=_status(source.status),
            location=Location(
                location_id=source.location.location_id,
                latitude=source.location.latitude,
                longitude=source.location.longitude,
            ),
            attendances=self._attendance_mapper.to_entity_list(list(source.attendances)),
            photos=self._photo_mapper.to_entity_list(list(source.photos)),
        )

    def to_response(self, entity: Event) -> EventResponse:
        return EventResponse(
            event_id=entity.event_id,
            title=entity.title,
            description=entity.description,
            start_time=entity.start_time,
            end_time=entity.end_time,
            family_friendly=entity.family_friendly,
            trash_collected=entity.trash_collected,
            number_of_attendees=entity.number_of_attendees,
            status=EventStatus(entity.status_id),
            location=LocationResponse(
                location_id=entity.location.location_id,
                latitude=entity.location.latitude,
                longitude=entity.location.longitude,
            ),
            attendances=self._attendance_mapper.to_response_list(entity.attendances),
            photos=self._photo_mapper.to_response_list(entity.photos),
            version=entity.version,
        )

    def to_entity_list(self, sources: List[EventSource]) -> List[Event]:
        return [self.to_entity(s) for s in sources]

    def to_response_list(self, entities: List[Event]) -> List[EventResponse]:
        return map_responses(self.to_response, entities)


def _status(status: EventStatus) -> Status:
    return Status(id=status.value, name=status.display_name)
