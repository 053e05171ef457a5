"""Conversion between user shapes and the User entity."""

from typing import List, Union

from cleanups.domain.mappers.base import map_responses
from cleanups.domain.models.user import User, UserRole
from cleanups.domain.schemas.user import CreateUserRequest, UpdateUserRequest, UserResponse

UserSource = Union[CreateUserRequest, UpdateUserRequest, UserResponse]


class UserMapper:
    """
    ``password_hash`` is never mapped from a request; the user service hashes the
    plain password after mapping. Responses omit the hash and the soft-delete
    flag, so both come back as ``None`` / ``False``.
    """

    def to_entity(self, source: UserSource) -> User:
        if isinstance(source, CreateUserRequest):
            return User(
                name=source.name,
                email=source.email,
                role_id=UserRole.VOLUNTEER.value,
            )
        if isinstance(source, UpdateUserRequest):
            return User(
                user_id=source.user_id,
                name=source.name,
                email=source.email,
                version=source.version or 0,
            )
        return User(
            user_id=source.user_id,
            name=source.name,
            email=source.email,
            role_id=int(source.role),
            created_date=source.created_date,
            version=source.version,
        )

    def to_response(self, entity: User) -> UserResponse:
        return UserResponse(
            user_id=entity.user_id,
            name=entity.name,
            email=entity.email,
            role=UserRole(entity.role_id),
            created_date=entity.created_date,
            version=entity.version,
        )

    def to_entity_list(self, sources: List[UserSource]) -> List[User]:
        return [self.to_entity(s) for s in sources]

    def to_response_list(self, entities: List[User]) -> List[UserResponse]:
        return map_responses(self.to_response, entities)
