"""Domain model for cleanup events, their location and status lookup."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional

from cleanups.domain.models.base import DomainModel

if TYPE_CHECKING:
    from cleanups.domain.models.event_attendance import EventAttendance
    from cleanups.domain.models.photo import Photo


class EventStatus(IntEnum):
    """Lifecycle status of an event. Values are the ids of the seeded status rows."""

    UPCOMING = 1
    ONGOING = 2
    COMPLETED = 4
    CANCELED = 5

    @property
    def display_name(self) -> str:
        return self.name.capitalize()



@dataclass
class Status(DomainModel):
    id: int
    name: str


@dataclass
class Location(DomainModel):
    location_id: int = 0
    latitude: Decimal = Decimal("0")
    longitude: Decimal = Decimal("0")


@dataclass
class Event(DomainModel):
    """
    A cleanup event. ``end_time`` is always after ``start_time``.
    ``version`` is the optimistic-concurrency token, bumped on every write.
    """

    event_id: int = 0
    title: str = ""
    description: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    family_friendly: bool = False
    trash_collected: Decimal = Decimal("0")
    number_of_attendees: int = 0
    status_id: int = EventStatus.UPCOMING.value
    location_id: int = 0
    is_deleted: bool = False
    version: int = 1
    status: Optional[Status] = None
    location: Optional[Location] = None
    attendances: List["EventAttendance"] = field(default_factory=list)
    photos: List["Photo"] = field(default_factory=list)


# Fields an update may change; identity, soft-delete flag and counters are owned by the store.
EVENT_MUTABLE_FIELDS = (
    "title",
    "description",
    "start_time",
    "end_time",
    "family_friendly",
    "trash_collected",
    "status_id",
    "location_id",
)
