"""Unit tests for EventService: validation short-circuit, mapping, outcome pass-through."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from cleanups.application.event_service import EventService
from cleanups.core.outcome import Outcome, StatusCode
from cleanups.domain.mappers import EventMapper
from cleanups.domain.models import Event, EventStatus, Location, Status
from cleanups.domain.schemas.event import UpdateEventStatusRequest
from cleanups.domain.validators import EventValidator
from factories import END, START, create_event_request, update_event_request


def _stored_event(event_id: int = 1, status: EventStatus = EventStatus.UPCOMING) -> Event:
    return Event(
        event_id=event_id,
        title="Beach cleanup",
        description="Bring gloves and bags.",
        start_time=START,
        end_time=END,
        family_friendly=True,
        status_id=status.value,
        location_id=4,
        status=Status(id=status.value, name=status.display_name),
        location=Location(location_id=4, latitude=Decimal("55.6761"), longitude=Decimal("12.5683")),
    )


@pytest.fixture
def repository():
    r = AsyncMock()
    r.create = AsyncMock(return_value=Outcome.created(_stored_event()))
    r.get_all = AsyncMock(return_value=Outcome.ok([_stored_event(1), _stored_event(2)]))
    r.get_by_id = AsyncMock(return_value=Outcome.ok(_stored_event()))
    r.update = AsyncMock(return_value=Outcome.ok(_stored_event()))
    r.delete = AsyncMock(return_value=Outcome.ok(_stored_event()))
    r.update_status = AsyncMock(return_value=Outcome.ok(_stored_event(status=EventStatus.ONGOING)))
    return r


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def event_service(repository, logger):
    return EventService(
        repository=repository,
        validator=EventValidator(),
        mapper=EventMapper(),
        logger=logger,
    )


# ---------- create ----------


async def test_create_happy_path(event_service, repository, logger):
    outcome = await event_service.create(create_event_request())

    assert outcome.status is StatusCode.CREATED
    assert outcome.value.event_id == 1
    assert outcome.value.status is EventStatus.UPCOMING
    entity = repository.create.await_args.args[0]
    assert entity.location.latitude == Decimal("55.676100")
    assert entity.status_id == EventStatus.UPCOMING.value
    logger.info.assert_called_once()


async def test_create_invalid_request_never_reaches_repository(event_service, repository, logger):
    outcome = await event_service.create(create_event_request(end_time=START))

    assert outcome == Outcome.bad_request("End time must be after start time.")
    repository.create.assert_not_awaited()
    logger.warning.assert_called_once()


async def test_create_null_request(event_service, repository):
    outcome = await event_service.create(None)
    assert outcome == Outcome.bad_request("Event cannot be null.")
    repository.create.assert_not_awaited()


async def test_create_passes_repository_failure_through(event_service, repository, logger):
    repository.create.return_value = Outcome.not_found("The specified status does not exist.")
    outcome = await event_service.create(create_event_request())
    assert outcome == Outcome.not_found("The specified status does not exist.")


async def test_create_repository_500_is_logged_as_error(event_service, repository, logger):
    repository.create.return_value = Outcome.internal_server_error("Something went wrong. Try again later")
    outcome = await event_service.create(create_event_request())
    assert outcome.status is StatusCode.INTERNAL_SERVER_ERROR
    logger.error.assert_called_once()


# ---------- reads ----------


async def test_get_all_maps_every_event(event_service):
    outcome = await event_service.get_all()
    assert outcome.status is StatusCode.OK
    assert [e.event_id for e in outcome.value] == [1, 2]


async def test_get_all_empty_list_stays_ok(event_service, repository):
    repository.get_all.return_value = Outcome.ok([])
    assert await event_service.get_all() == Outcome.ok([])


async def test_get_by_id_invalid_id(event_service, repository):
    outcome = await event_service.get_by_id(0)
    assert outcome == Outcome.bad_request("Event Id must be greater than zero.")
    repository.get_by_id.assert_not_awaited()


async def test_get_by_id_not_found(event_service, repository):
    repository.get_by_id.return_value = Outcome.not_found("Event with id: 9 does not exist")
    outcome = await event_service.get_by_id(9)
    assert outcome.status is StatusCode.NOT_FOUND
    repository.get_by_id.assert_awaited_once_with(9)


# ---------- update / delete / status ----------


async def test_update_maps_request_to_entity(event_service, repository):
    request = update_event_request(1, 4, trash_collected=Decimal("7.5"), status=2, version=3)
    outcome = await event_service.update(request)

    assert outcome.is_success
    entity = repository.update.await_args.args[0]
    assert (entity.event_id, entity.location_id, entity.status_id, entity.version) == (1, 4, 2, 3)
    assert entity.trash_collected == Decimal("7.5")


async def test_update_conflict_passes_through(event_service, repository):
    repository.update.return_value = Outcome.conflict("Event was modified by another user. Refresh and retry")
    outcome = await event_service.update(update_event_request(1, 4))
    assert outcome == Outcome.conflict("Event was modified by another user. Refresh and retry")


async def test_update_invalid(event_service, repository):
    outcome = await event_service.update(update_event_request(1, 4, trash_collected=Decimal("-1")))
    assert outcome.error == "Trash collected cannot be negative."
    repository.update.assert_not_awaited()


async def test_delete(event_service, repository):
    outcome = await event_service.delete(1)
    assert outcome.status is StatusCode.OK
    repository.delete.assert_awaited_once_with(1)


async def test_delete_invalid_id(event_service, repository):
    assert (await event_service.delete(-5)).status is StatusCode.BAD_REQUEST
    repository.delete.assert_not_awaited()


async def test_update_status(event_service, repository):
    outcome = await event_service.update_status(UpdateEventStatusRequest(event_id=1, new_status=2))
    assert outcome.value.status is EventStatus.ONGOING
    repository.update_status.assert_awaited_once_with(1, 2)


async def test_update_status_unknown_status(event_service, repository):
    outcome = await event_service.update_status(UpdateEventStatusRequest(event_id=1, new_status=3))
    assert outcome == Outcome.bad_request("Status is not valid.")
    repository.update_status.assert_not_awaited()


async def test_repository_ok_without_value_becomes_500(event_service, repository):
    repository.get_by_id.return_value = Outcome.ok(None)
    outcome = await event_service.get_by_id(1)
    assert outcome.status is StatusCode.INTERNAL_SERVER_ERROR
