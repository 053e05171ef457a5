"""Validation rules for photo requests."""

from typing import Optional

from cleanups.core.outcome import Outcome
from cleanups.domain.schemas.photo import CreatePhotoRequest, UpdatePhotoRequest
from cleanups.domain.validators.common import VALID, is_positive_id, validate_id, validate_version

CAPTION_MAX_LENGTH = 200


def _validate_caption(caption: Optional[str]) -> Optional[Outcome[bool]]:
    if caption is not None and len(caption) > CAPTION_MAX_LENGTH:
        return Outcome.bad_request(f"Caption cannot exceed {CAPTION_MAX_LENGTH} characters")
    return None


class PhotoValidator:
    def validate_for_create(self, request: Optional[CreatePhotoRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Photo cannot be null.")
        if not is_positive_id(request.event_id):
            return Outcome.bad_request("Event Id must be greater than zero.")
        if not request.photo_data:
            return Outcome.bad_request("Photo data is required.")
        return _validate_caption(request.caption) or VALID

    def validate_for_update(self, request: Optional[UpdatePhotoRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Photo cannot be null.")
        if not is_positive_id(request.photo_id):
            return Outcome.bad_request("Photo Id must be greater than zero.")
        return _validate_caption(request.caption) or validate_version(request.version) or VALID

    def validate_id(self, photo_id: int) -> Outcome[bool]:
        return validate_id(photo_id, "Photo Id")

    def validate_event_id(self, event_id: int) -> Outcome[bool]:
        return validate_id(event_id, "Event Id")
