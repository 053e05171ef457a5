"""Pydantic schemas for event photos. Binary data travels as base64 in JSON."""

from typing import Optional

from pydantic import ConfigDict

from cleanups.domain.schemas.base import CreateRequest, Response, UpdateRequest


class CreatePhotoRequest(CreateRequest):
    model_config = ConfigDict(frozen=True, ser_json_bytes="base64", val_json_bytes="base64")

    event_id: Optional[int] = None
    photo_data: Optional[bytes] = None
    caption: Optional[str] = None


class UpdatePhotoRequest(UpdateRequest):
    photo_id: Optional[int] = None
    caption: Optional[str] = None
    version: Optional[int] = None


class PhotoResponse(Response):
    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    photo_id: int
    event_id: int
    photo_data: bytes
    caption: Optional[str] = None
    version: int
