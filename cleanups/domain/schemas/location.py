"""Location shapes. A location is created together with its event."""

from decimal import Decimal
from typing import Optional

from cleanups.domain.schemas.base import CreateRequest, Response


class CreateLocationRequest(CreateRequest):
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None


class LocationResponse(Response):
    location_id: int
    latitude: Decimal
    longitude: Decimal
