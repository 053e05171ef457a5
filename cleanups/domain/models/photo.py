"""Domain model for photos taken at an event."""

from dataclasses import dataclass
from typing import Optional

from cleanups.domain.models.base import DomainModel


@dataclass
class Photo(DomainModel):
    photo_id: int = 0
    event_id: int = 0
    photo_data: bytes = b""
    caption: Optional[str] = None
    version: int = 1


# The caption is the only part of a photo that can be edited after upload.
PHOTO_MUTABLE_FIELDS = ("caption",)
