"""User application service. Plain passwords are hashed here, between mapping and persistence."""

import logging
from typing import List, Optional

from cleanups.application.outcome_log import log_outcome
from cleanups.application.repositories import UserRepository
from cleanups.core.outcome import Outcome
from cleanups.domain.mappers.user_mapper import UserMapper
from cleanups.domain.schemas.user import (
    ChangePasswordRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from cleanups.domain.validators.user_validator import UserValidator
from cleanups.security.passwords import hash_password


class UserService:
    def __init__(
        self,
        repository: UserRepository,
        validator: UserValidator,
        mapper: UserMapper,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._mapper = mapper
        self._logger = logger or logging.getLogger(__name__)

    async def create(self, request: Optional[CreateUserRequest]) -> Outcome[UserResponse]:
        validation = self._validator.validate_for_create(request)
        if not validation.is_success:
            log_outcome(self._logger, "user_create", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        entity.password_hash = hash_password(request.password)
        outcome = (await self._repository.create(entity)).transform(self._mapper.to_response)
        log_outcome(
            self._logger,
            "user_create",
            outcome,
            user_id=outcome.value.user_id if outcome.value else None,
        )
        return outcome

    async def get_all(self) -> Outcome[List[UserResponse]]:
        outcome = (await self._repository.get_all()).transform(self._mapper.to_response_list)
        log_outcome(self._logger, "user_get_all", outcome)
        return outcome

    async def get_by_id(self, user_id: int) -> Outcome[UserResponse]:
        validation = self._validator.validate_id(user_id)
        if not validation.is_success:
            log_outcome(self._logger, "user_get_by_id", validation, user_id=user_id)
            return validation.forward()

        outcome = (await self._repository.get_by_id(user_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "user_get_by_id", outcome, user_id=user_id)
        return outcome

    async def update(self, request: Optional[UpdateUserRequest]) -> Outcome[UserResponse]:
        """Change name and/or email. Passwords go through ``change_password``."""
        validation = self._validator.validate_for_update(request)
        if not validation.is_success:
            log_outcome(self._logger, "user_update", validation)
            return validation.forward()

        entity = self._mapper.to_entity(request)
        outcome = (await self._repository.update(entity)).transform(self._mapper.to_response)
        log_outcome(self._logger, "user_update", outcome, user_id=entity.user_id)
        return outcome

    async def change_password(self, request: Optional[ChangePasswordRequest]) -> Outcome[bool]:
        validation = self._validator.validate_for_password_change(request)
        if not validation.is_success:
            log_outcome(self._logger, "user_change_password", validation)
            return validation.forward()

        outcome = await self._repository.update_password(
            request.user_id, hash_password(request.new_password)
        )
        log_outcome(self._logger, "user_change_password", outcome, user_id=request.user_id)
        return outcome

    async def delete(self, user_id: int) -> Outcome[UserResponse]:
        validation = self._validator.validate_id(user_id)
        if not validation.is_success:
            log_outcome(self._logger, "user_delete", validation, user_id=user_id)
            return validation.forward()

        outcome = (await self._repository.delete(user_id)).transform(self._mapper.to_response)
        log_outcome(self._logger, "user_delete", outcome, user_id=user_id)
        return outcome
