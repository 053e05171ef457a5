"""User validator: name, email and password rules."""

import pytest

from cleanups.core.outcome import Outcome
from cleanups.domain.schemas.user import ChangePasswordRequest, UpdateUserRequest
from cleanups.domain.validators.user_validator import UserValidator
from factories import create_user_request


@pytest.fixture
def validator():
    return UserValidator()


def test_valid_create_is_ok(validator):
    assert validator.validate_for_create(create_user_request()) == Outcome.ok(True)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": ""}, "Name is required."),
        ({"name": "n" * 101}, "Name cannot exceed 100 characters."),
        ({"email": None}, "Email is required."),
        ({"email": "a" * 250 + "@example.com"}, "Email cannot exceed 255 characters."),
        ({"email": "not-an-email"}, "Invalid email format."),
        ({"email": "two@@example.com"}, "Invalid email format."),
        ({"password": None}, "Password is required."),
        ({"password": "short"}, "Password must be between 8 and 50 characters long."),
        ({"password": "p" * 51}, "Password must be between 8 and 50 characters long."),
    ],
)
def test_create_rules(validator, overrides, message):
    assert validator.validate_for_create(create_user_request(**overrides)) == Outcome.bad_request(
        message
    )


def test_null_request(validator):
    assert validator.validate_for_create(None).error == "User cannot be null."
    assert validator.validate_for_update(None).error == "User cannot be null."


def test_password_length_bounds_are_inclusive(validator):
    assert validator.validate_for_create(create_user_request(password="p" * 8)).is_success
    assert validator.validate_for_create(create_user_request(password="p" * 50)).is_success


def test_name_checked_before_email(validator):
    request = create_user_request(name="", email="bad")
    assert validator.validate_for_create(request).error == "Name is required."


def test_update_rules(validator):
    ok = UpdateUserRequest(user_id=3, name="Sam", email="sam@example.com")
    assert validator.validate_for_update(ok).is_success
    assert (
        validator.validate_for_update(ok.model_copy(update={"user_id": 0})).error
        == "User Id must be greater than zero."
    )
    assert (
        validator.validate_for_update(ok.model_copy(update={"email": "nope"})).error
        == "Invalid email format."
    )
    assert (
        validator.validate_for_update(ok.model_copy(update={"version": -1})).error
        == "Version must be greater than zero."
    )


def test_password_change_rules(validator):
    assert validator.validate_for_password_change(
        ChangePasswordRequest(user_id=1, new_password="long-enough")
    ).is_success
    assert (
        validator.validate_for_password_change(
            ChangePasswordRequest(user_id=0, new_password="long-enough")
        ).error
        == "User Id must be greater than zero."
    )
    assert (
        validator.validate_for_password_change(
            ChangePasswordRequest(user_id=1, new_password="tiny")
        ).error
        == "Password must be between 8 and 50 characters long."
    )
