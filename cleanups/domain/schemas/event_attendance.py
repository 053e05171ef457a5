"""Pydantic schemas for event attendance."""

from datetime import datetime
from typing import Optional

from cleanups.domain.schemas.base import CreateRequest, Response, UpdateRequest


class CreateEventAttendanceRequest(CreateRequest):
    event_id: Optional[int] = None
    user_id: Optional[int] = None


class UpdateEventAttendanceRequest(UpdateRequest):
    event_id: Optional[int] = None
    user_id: Optional[int] = None
    check_in: Optional[datetime] = None
    version: Optional[int] = None


class EventAttendanceResponse(Response):
    event_id: int
    user_id: int
    check_in: Optional[datetime] = None
    created_date: Optional[datetime] = None
    version: int
