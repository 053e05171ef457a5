"""Pydantic schemas for event requests and responses.

Request fields are optional on purpose: presence and range rules belong to the
event validator, which reports them as a BadRequest outcome instead of raising.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from cleanups.domain.models.event import EventStatus
from cleanups.domain.schemas.base import CreateRequest, Response, UpdateRequest, WireModel
from cleanups.domain.schemas.event_attendance import EventAttendanceResponse
from cleanups.domain.schemas.location import CreateLocationRequest, LocationResponse
from cleanups.domain.schemas.photo import PhotoResponse


class CreateEventRequest(CreateRequest):
    title: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    family_friendly: bool = False
    location: Optional[CreateLocationRequest] = None


class UpdateEventRequest(UpdateRequest):
    event_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    family_friendly: bool = False
    trash_collected: Optional[Decimal] = None
    status: Optional[int] = None
    location_id: Optional[int] = None
    # Concurrency token the caller last saw; None means "whatever is current".
    version: Optional[int] = None


class UpdateEventStatusRequest(WireModel):
    event_id: Optional[int] = None
    new_status: Optional[int] = None


class EventResponse(Response):
    event_id: int
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    family_friendly: bool
    trash_collected: Decimal
    number_of_attendees: int
    status: EventStatus
    location: LocationResponse
    attendances: List[EventAttendanceResponse] = []
    photos: List[PhotoResponse] = []
    version: int
