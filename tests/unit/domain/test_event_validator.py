"""Event validator: fail-fast ordering and the rule messages."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from cleanups.core.outcome import Outcome, StatusCode
from cleanups.domain.schemas.event import UpdateEventStatusRequest
from cleanups.domain.schemas.location import CreateLocationRequest
from cleanups.domain.validators.event_validator import EventValidator
from factories import END, START, create_event_request, update_event_request


@pytest.fixture
def validator():
    return EventValidator()


def test_valid_create_is_ok(validator):
    assert validator.validate_for_create(create_event_request()) == Outcome.ok(True)


def test_null_create_request(validator):
    assert validator.validate_for_create(None) == Outcome.bad_request("Event cannot be null.")


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": ""}, "Title is required."),
        ({"title": "   "}, "Title is required."),
        ({"title": "x" * 201}, "Title cannot exceed 200 characters."),
        ({"description": None}, "Description is required."),
        ({"start_time": None}, "Start time is required."),
        ({"end_time": None}, "End time is required."),
        ({"end_time": START}, "End time must be after start time."),
        ({"end_time": START - timedelta(hours=1)}, "End time must be after start time."),
        ({"location": None}, "Location is required."),
        (
            {"location": CreateLocationRequest(latitude=Decimal("91"), longitude=Decimal("0"))},
            "Latitude must be between -90 and 90.",
        ),
        (
            {"location": CreateLocationRequest(latitude=Decimal("0"), longitude=Decimal("-180.5"))},
            "Longitude must be between -180 and 180.",
        ),
    ],
)
def test_create_rules(validator, overrides, message):
    outcome = validator.validate_for_create(create_event_request(**overrides))
    assert outcome == Outcome.bad_request(message)


def test_create_rejects_mixed_timezone_awareness(validator):
    request = create_event_request(end_time=END.replace(tzinfo=timezone.utc))
    outcome = validator.validate_for_create(request)
    assert outcome.status is StatusCode.BAD_REQUEST
    assert "timezone" in outcome.error


def test_create_fails_fast_on_first_rule(validator):
    # Title, description and ordering are all broken; the title rule is first.
    request = create_event_request(title="", description="", end_time=START)
    assert validator.validate_for_create(request).error == "Title is required."


def test_boundary_coordinates_are_valid(validator):
    location = CreateLocationRequest(latitude=Decimal("-90"), longitude=Decimal("180"))
    assert validator.validate_for_create(create_event_request(location=location)).is_success


def test_valid_update_is_ok(validator):
    assert validator.validate_for_update(update_event_request(1, 1)).is_success


@pytest.mark.parametrize(
    "event_id, location_id, overrides, message",
    [
        (0, 1, {}, "Event Id must be greater than zero."),
        (1, 1, {"title": None}, "Title is required."),
        (1, 1, {"trash_collected": None}, "Trash collected is required."),
        (1, 1, {"trash_collected": Decimal("-0.5")}, "Trash collected cannot be negative."),
        (1, 1, {"status": 3}, "Status is not valid."),
        (1, 1, {"status": None}, "Status is not valid."),
        (1, 0, {}, "Location Id must be greater than zero."),
        (1, 1, {"version": 0}, "Version must be greater than zero."),
    ],
)
def test_update_rules(validator, event_id, location_id, overrides, message):
    request = update_event_request(event_id, location_id, **overrides)
    assert validator.validate_for_update(request) == Outcome.bad_request(message)


def test_update_id_is_checked_before_fields(validator):
    request = update_event_request(-1, 0, title="")
    assert validator.validate_for_update(request).error == "Event Id must be greater than zero."


def test_status_update_rules(validator):
    assert validator.validate_for_status_update(None).error == "Status update cannot be null."
    assert (
        validator.validate_for_status_update(UpdateEventStatusRequest(event_id=0, new_status=2)).error
        == "Event Id must be greater than zero."
    )
    assert (
        validator.validate_for_status_update(UpdateEventStatusRequest(event_id=1, new_status=9)).error
        == "Status is not valid."
    )
    assert validator.validate_for_status_update(
        UpdateEventStatusRequest(event_id=1, new_status=4)
    ).is_success


@pytest.mark.parametrize("value", [0, -3, None, True])
def test_validate_id_rejects_non_positive(validator, value):
    assert validator.validate_id(value) == Outcome.bad_request("Event Id must be greater than zero.")


def test_aware_times_are_accepted(validator):
    start = datetime(2030, 1, 1, 8, tzinfo=timezone.utc)
    request = create_event_request(start_time=start, end_time=start + timedelta(hours=2))
    assert validator.validate_for_create(request).is_success
