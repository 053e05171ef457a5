"""Domain model for a user's attendance at an event. Identity is (event_id, user_id)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cleanups.domain.models.base import DomainModel


@dataclass
class EventAttendance(DomainModel):
    event_id: int = 0
    user_id: int = 0
    check_in: Optional[datetime] = None
    created_date: Optional[datetime] = None
    version: int = 1


EVENT_ATTENDANCE_MUTABLE_FIELDS = ("check_in",)
