"""Outcome: factories, derived success, immutability, transform and forward."""

import pytest

from cleanups.core.outcome import Outcome, StatusCode


def test_direct_construction_raises():
    with pytest.raises(TypeError):
        Outcome()
    with pytest.raises(TypeError):
        Outcome(StatusCode.OK, 1)


@pytest.mark.parametrize(
    "outcome, status, success",
    [
        (Outcome.ok(1), StatusCode.OK, True),
        (Outcome.created(1), StatusCode.CREATED, True),
        (Outcome.no_content(), StatusCode.NO_CONTENT, True),
        (Outcome.not_modified(), StatusCode.NOT_MODIFIED, False),
        (Outcome.bad_request("x"), StatusCode.BAD_REQUEST, False),
        (Outcome.unauthorized("x"), StatusCode.UNAUTHORIZED, False),
        (Outcome.forbidden("x"), StatusCode.FORBIDDEN, False),
        (Outcome.not_found("x"), StatusCode.NOT_FOUND, False),
        (Outcome.conflict("x"), StatusCode.CONFLICT, False),
        (Outcome.internal_server_error("x"), StatusCode.INTERNAL_SERVER_ERROR, False),
    ],
)
def test_factories_set_status_and_success(outcome, status, success):
    assert outcome.status is status
    assert outcome.status_code == int(status)
    assert outcome.is_success is success


def test_failures_carry_message_and_no_value():
    outcome = Outcome.not_found("Event with id: 3 does not exist")
    assert outcome.error == "Event with id: 3 does not exist"
    assert outcome.value is None


def test_outcome_is_immutable():
    outcome = Outcome.ok(1)
    with pytest.raises(AttributeError):
        outcome._value = 2
    with pytest.raises(AttributeError):
        del outcome._status
    assert outcome.value == 1


def test_equality_compares_status_value_and_error():
    assert Outcome.ok([1, 2]) == Outcome.ok([1, 2])
    assert Outcome.ok(1) != Outcome.created(1)
    assert Outcome.conflict("a") != Outcome.conflict("b")
    assert hash(Outcome.bad_request("a")) == hash(Outcome.bad_request("a"))


def test_unhashable_value_still_hashes():
    assert isinstance(hash(Outcome.ok([1])), int)


def test_transform_maps_value_and_keeps_status():
    assert Outcome.created(2).transform(lambda v: v * 10) == Outcome.created(20)
    assert Outcome.ok("a").transform(str.upper) == Outcome.ok("A")


def test_transform_forwards_failures_without_calling_fn():
    def boom(_):
        raise AssertionError("must not be called")

    assert Outcome.conflict("busy").transform(boom) == Outcome.conflict("busy")
    assert Outcome.no_content().transform(boom) == Outcome.no_content()
    assert Outcome.not_modified().transform(boom) == Outcome.not_modified()


def test_transform_of_ok_with_none_is_internal_error():
    outcome = Outcome.ok(None).transform(lambda v: v)
    assert outcome.status is StatusCode.INTERNAL_SERVER_ERROR
    assert outcome.error == "Data is null for status code that should have data."


def test_transform_keeps_empty_list():
    assert Outcome.ok([]).transform(list) == Outcome.ok([])


def test_forward_keeps_status_and_message():
    forwarded = Outcome.bad_request("Title is required.").forward()
    assert forwarded == Outcome.bad_request("Title is required.")


def test_repr_mentions_status():
    assert "CONFLICT" in repr(Outcome.conflict("x"))
    assert "OK" in repr(Outcome.ok(1))
