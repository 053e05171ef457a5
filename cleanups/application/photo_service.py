"""Photo application service."""

import logging
from typing import List, Optional

from cleanups.application.outcome_log import log_outcome
from cleanups.application.repositories import PhotoRepository
from cleanups.core.outcome import Outcome
from cleanups.domain.mappers.photo_mapper import PhotoMapper
from cleanups.domain.schemas.photo import CreatePhotoRequest, PhotoResponse, UpdatePhotoRequest
from cleanups.domain.validators.photo_validator import PhotoValidator


class PhotoService:
    def __init__(
        self,
        repository: PhotoRepository,
        validator: PhotoValidator,
        mapper: PhotoMapper,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._mapper = mapper
        self._logger = logger or logging.getLogger(__name__)

    async def create(self, request: Optional[CreatePhotoRequest]) -> Outcome[PhotoResponse]:
        validation = self._validator.validate_for_create(request)
        if not validation.is_success:
            log_outcome(self._logger, "photo_create", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.create(entity)).transform(self._mapper.to_response)
        log_outcome(self._logger, "photo_create", outcome, event_id=entity.event_id)
        return outcome

    async def get_all(self) -> Outcome[List[PhotoResponse]]:
        outcome = (await self._repository.get_all()).transform(self._mapper.to_response_list)
        log_outcome(self._logger, "photo_get_all", outcome)
        return outcome

    async def get_by_id(self, photo_id: int) -> Outcome[PhotoResponse]:
        validation = self._validator.validate_id(photo_id)
        if not validation.is_success:
            log_outcome(self._logger, "photo_get_by_id", validation, photo_id=photo_id)
            return validation.forward()

        outcome = (await self._repository.get_by_id(photo_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "photo_get_by_id", outcome, photo_id=photo_id)
        return outcome

    async def get_photos_by_event_id(self, event_id: int) -> Outcome[List[PhotoResponse]]:
        validation = self._validator.validate_event_id(event_id)
        if not validation.is_success:
            log_outcome(self._logger, "photo_get_by_event", validation, event_id=event_id)
            return validation.forward()

        outcome = (await self._repository.get_photos_by_event_id(event_id)).transform(
            self._mapper.to_response_list
        )
        log_outcome(self._logger, "photo_get_by_event", outcome, event_id=event_id)
        return outcome

    async def update(self, request: Optional[UpdatePhotoRequest]) -> Outcome[PhotoResponse]:
        validation = self._validator.validate_for_update(request)
        if not validation.is_success:
            log_outcome(self._logger, "photo_update", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.update(entity)).transform(self._mapper.to_response)
        log_outcome(self._logger, "photo_update", outcome, photo_id=entity.photo_id)
        return outcome

    async def delete(self, photo_id: int) -> Outcome[PhotoResponse]:
        validation = self._validator.validate_id(photo_id)
        if not validation.is_success:
            log_outcome(self._logger, "photo_delete", validation, photo_id=photo_id)
            return validation.forward()

        outcome = (await self._repository.delete(photo_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "photo_delete", outcome, photo_id=photo_id)
        return outcome
