"""Conversion between photo shapes and the Photo entity."""

from typing import List, Union

from cleanups.domain.mappers.base import map_responses
from cleanups.domain.models.photo import Photo
from cleanups.domain.schemas.photo import CreatePhotoRequest, PhotoResponse, UpdatePhotoRequest

PhotoSource = Union[CreatePhotoRequest, UpdatePhotoRequest, PhotoResponse]


class PhotoMapper:
    """Update requests only carry the caption; event id and data stay at their defaults."""

    def to_entity(self, source: PhotoSource) -> Photo:
        if isinstance(source, CreatePhotoRequest):
            return Photo(
                event_id=source.event_id,
                photo_data=source.photo_data,
                caption=source.caption,
            )
        if isinstance(source, UpdatePhotoRequest):
            return Photo(
                photo_id=source.photo_id,
                caption=source.caption,
                version=source.version or 0,
            )
        return Photo(
            photo_id=source.photo_id,
            event_id=source.event_id,
            photo_data=source.photo_data,
            caption=source.caption,
            version=source.version,
        )

    def to_response(self, entity: Photo) -> PhotoResponse:
        return PhotoResponse(
            photo_id=entity.photo_id,
            event_id=entity.event_id,
            photo_data=entity.photo_data,
            caption=entity.caption,
            version=entity.version,
        )

    def to_entity_list(self, sources: List[PhotoSource]) -> List[Photo]:
        return [self.to_entity(s) for s in sources]

    def to_response_list(self, entities: List[Photo]) -> List[PhotoResponse]:
        return map_responses(self.to_response, entities)
