"""End-to-end flows through the wired services over an in-memory SQLite store."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

from cleanups.container import build_services
from cleanups.core.outcome import Outcome, StatusCode
from cleanups.domain.models import EventStatus
from cleanups.domain.schemas.event_attendance import CreateEventAttendanceRequest
from cleanups.domain.schemas.event import UpdateEventStatusRequest
from cleanups.domain.schemas.photo import CreatePhotoRequest, UpdatePhotoRequest
from cleanups.domain.schemas.user import ChangePasswordRequest
from cleanups.security.passwords import verify_password
from factories import create_event_request, create_user_request, update_event_request


async def test_end_before_start_is_rejected_before_the_store(services):
    request = create_event_request(
        title="Beach Cleanup",
        start_time=datetime(2025, 6, 1, 9, 0),
        end_time=datetime(2025, 6, 1, 8, 0),
    )
    with patch.object(services.events._repository, "create") as create:
        outcome = await services.events.create(request)

    assert outcome == Outcome.bad_request("End time must be after start time.")
    create.assert_not_called()


async def test_negative_id_is_rejected_before_the_store(services):
    with patch.object(services.events._repository, "get_by_id") as get_by_id:
        outcome = await services.events.get_by_id(-1)

    assert outcome.status is StatusCode.BAD_REQUEST
    get_by_id.assert_not_called()


async def test_overlong_caption_is_rejected(services):
    outcome = await services.photos.update(UpdatePhotoRequest(photo_id=42, caption="x" * 201))
    assert outcome == Outcome.bad_request("Caption cannot exceed 200 characters")


async def test_deleted_user_disappears_from_reads(services):
    kept = (await services.users.create(create_user_request(email="kept@example.com"))).value
    gone = (await services.users.create(create_user_request(email="gone@example.com"))).value

    assert (await services.users.delete(gone.user_id)).status is StatusCode.OK

    listed = await services.users.get_all()
    assert [u.user_id for u in listed.value] == [kept.user_id]
    assert await services.users.get_by_id(gone.user_id) == Outcome.not_found(
        f"User with id: {gone.user_id} does not exist"
    )


async def test_soft_delete_is_ok_then_not_found(services):
    event = (await services.events.create(create_event_request())).value
    assert (await services.events.delete(event.event_id)).status is StatusCode.OK
    assert (await services.events.delete(event.event_id)).status is StatusCode.NOT_FOUND


async def test_event_round_trip(services):
    created = await services.events.create(create_event_request())
    assert created.status is StatusCode.CREATED
    assert created.value.status is EventStatus.UPCOMING
    assert created.value.number_of_attendees == 0

    fetched = await services.events.get_by_id(created.value.event_id)
    assert fetched.value == created.value


async def test_concurrent_updates_with_the_same_version(services):
    event = (await services.events.create(create_event_request())).value
    location_id = event.location.location_id

    first = await services.events.update(
        update_event_request(event.event_id, location_id, title="River cleanup", version=event.version)
    )
    second = await services.events.update(
        update_event_request(event.event_id, location_id, title="Park cleanup", version=event.version)
    )

    assert first.status is StatusCode.OK
    assert second == Outcome.conflict("Event was modified by another user. Refresh and retry")
    assert (await services.events.get_by_id(event.event_id)).value.title == "River cleanup"


async def test_second_attendance_for_same_pair_is_conflict(services):
    event = (await services.events.create(create_event_request())).value
    user = (await services.users.create(create_user_request())).value
    request = CreateEventAttendanceRequest(event_id=event.event_id, user_id=user.user_id)

    assert (await services.event_attendances.create(request)).status is StatusCode.CREATED
    assert (await services.event_attendances.create(request)).status is StatusCode.CONFLICT

    attendees = await services.event_attendances.get_users_by_event_id(event.event_id)
    assert [u.user_id for u in attendees.value] == [user.user_id]
    assert (await services.events.get_by_id(event.event_id)).value.number_of_attendees == 1


async def test_duplicate_email_is_conflict(services):
    await services.users.create(create_user_request())
    outcome = await services.users.create(create_user_request(name="Someone Else"))
    assert outcome == Outcome.conflict("A user with this email already exists.")


async def test_event_lifecycle_with_photos(services):
    event = (await services.events.create(create_event_request())).value
    photo = await services.photos.create(
        CreatePhotoRequest(event_id=event.event_id, photo_data=b"\x89PNG", caption="Before")
    )
    assert photo.status is StatusCode.CREATED

    started = await services.events.update_status(
        UpdateEventStatusRequest(event_id=event.event_id, new_status=EventStatus.ONGOING.value)
    )
    assert started.value.status is EventStatus.ONGOING
    assert [p.caption for p in started.value.photos] == ["Before"]

    canceled = await services.events.update_status(
        UpdateEventStatusRequest(event_id=event.event_id, new_status=EventStatus.CANCELED.value)
    )
    assert canceled.value.status is EventStatus.CANCELED

    reopened = await services.events.update_status(
        UpdateEventStatusRequest(event_id=event.event_id, new_status=EventStatus.UPCOMING.value)
    )
    assert reopened.status is StatusCode.OK
    assert reopened.value.status is EventStatus.UPCOMING


async def test_change_password_replaces_the_hash(services):
    user = (await services.users.create(create_user_request())).value

    changed = await services.users.change_password(
        ChangePasswordRequest(user_id=user.user_id, new_password="n3w-passw0rd")
    )
    assert changed == Outcome.ok(True)

    stored = await services.users._repository.get_by_id(user.user_id)
    assert verify_password("n3w-passw0rd", stored.value.password_hash)
    assert not verify_password("s3cret-pass", stored.value.password_hash)


async def test_trash_and_title_updates_race_from_two_sessions(session_factory, settings):
    async with session_factory() as organizer_session, session_factory() as volunteer_session:
        organizer = build_services(organizer_session, settings)
        volunteer = build_services(volunteer_session, settings)
        event = (await organizer.events.create(create_event_request())).value
        location_id = event.location.location_id

        # Both sides read version 1 before either writes.
        assert (await organizer.events.get_by_id(event.event_id)).value.version == 1
        assert (await volunteer.events.get_by_id(event.event_id)).value.version == 1

        trash = await organizer.events.update(
            update_event_request(
                event.event_id, location_id, trash_collected=Decimal("12.5"), version=1
            )
        )
        title = await volunteer.events.update(
            update_event_request(event.event_id, location_id, title="Renamed cleanup", version=1)
        )

        assert trash.status is StatusCode.OK
        assert trash.value.version == 2
        assert title == Outcome.conflict("Event was modified by another user. Refresh and retry")

        stored = (await volunteer.events.get_by_id(event.event_id)).value
        assert (stored.title, stored.trash_collected, stored.version) == (
            "Beach cleanup",
            Decimal("12.5"),
            2,
        )
