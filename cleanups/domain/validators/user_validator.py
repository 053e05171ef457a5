"""Validation rules for user requests. Field order: name, email, password."""

from typing import Optional

from cleanups.core.outcome import Outcome
from cleanups.domain.schemas.user import (
    ChangePasswordRequest,
    CreateUserRequest,
    UpdateUserRequest,
)
from cleanups.domain.validators.common import (
    VALID,
    is_blank,
    is_positive_id,
    is_valid_email,
    validate_id,
    validate_password,
    validate_version,
)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255


class UserValidator:
    def validate_for_create(self, request: Optional[CreateUserRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("User cannot be null.")
        return (
            self._validate_name_and_email(request.name, request.email)
            or validate_password(request.password)
            or VALID
        )

    def validate_for_update(self, request: Optional[UpdateUserRequest]) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("User cannot be null.")
        if not is_positive_id(request.user_id):
            return Outcome.bad_request("User Id must be greater than zero.")
        return (
            self._validate_name_and_email(request.name, request.email)
            or validate_version(request.version)
            or VALID
        )

    def validate_for_password_change(
        self, request: Optional[ChangePasswordRequest]
    ) -> Outcome[bool]:
        if request is None:
            return Outcome.bad_request("Request cannot be null.")
        if not is_positive_id(request.user_id):
            return Outcome.bad_request("User Id must be greater than zero.")
        return validate_password(request.new_password) or VALID

    def validate_id(self, user_id: int) -> Outcome[bool]:
        return validate_id(user_id, "User Id")

    @staticmethod
    def _validate_name_and_email(
        name: Optional[str], email: Optional[str]
    ) -> Optional[Outcome[bool]]:
        if is_blank(name):
            return Outcome.bad_request("Name is required.")
        if len(name) > NAME_MAX_LENGTH:
            return Outcome.bad_request(f"Name cannot exceed {NAME_MAX_LENGTH} characters.")
        if is_blank(email):
            return Outcome.bad_request("Email is required.")
        if len(email) > EMAIL_MAX_LENGTH:
            return Outcome.bad_request(f"Email cannot exceed {EMAIL_MAX_LENGTH} characters.")
        if not is_valid_email(email):
            return Outcome.bad_request("Invalid email format.")
        return None
