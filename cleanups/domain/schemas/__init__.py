"""Domain schemas. Request/response shapes."""

from cleanups.domain.schemas.base import CreateRequest, Response, UpdateRequest, WireModel
from cleanups.domain.schemas.event import (
    CreateEventRequest,
    EventResponse,
    UpdateEventRequest,
    UpdateEventStatusRequest,
)
from cleanups.domain.schemas.event_attendance import (
    CreateEventAttendanceRequest,
    EventAttendanceResponse,
    UpdateEventAttendanceRequest,
)
from cleanups.domain.schemas.location import CreateLocationRequest, LocationResponse
from cleanups.domain.schemas.photo import CreatePhotoRequest, PhotoResponse, UpdatePhotoRequest
from cleanups.domain.schemas.user import (
    ChangePasswordRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "CreateEventAttendanceRequest",
    "CreateEventRequest",
    "CreateLocationRequest",
    "CreatePhotoRequest",
    "CreateRequest",
    "CreateUserRequest",
    "EventAttendanceResponse",
    "EventResponse",
    "LocationResponse",
    "PhotoResponse",
    "Response",
    "UpdateEventAttendanceRequest",
    "UpdateEventRequest",
    "UpdateEventStatusRequest",
    "UpdatePhotoRequest",
    "UpdateRequest",
    "UpdateUserRequest",
    "UserResponse",
    "WireModel",
]
