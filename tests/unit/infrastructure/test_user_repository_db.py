"""DbUserRepository against in-memory SQLite: email uniqueness, soft delete, password updates."""

from dataclasses import replace

import pytest

from cleanups.core.outcome import Outcome, StatusCode
from cleanups.domain.models import User, UserRole
from cleanups.infrastructure.database.user_repository_db import DbUserRepository


def _user(email: str = "alex@example.com", **overrides) -> User:
    fields = {"name": "Alex", "email": email, "password_hash": "$argon2id$hash"}
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def repository(session):
    return DbUserRepository(session)


async def test_create_and_get(repository):
    created = await repository.create(_user())
    assert created.status is StatusCode.CREATED
    user = created.value
    assert user.user_id > 0
    assert user.role_id == UserRole.VOLUNTEER.value
    assert user.created_date is not None
    assert user.version == 1

    fetched = await repository.get_by_id(user.user_id)
    assert fetched.value == user


async def test_duplicate_email_is_conflict(repository):
    await repository.create(_user())
    outcome = await repository.create(_user(name="Other"))
    assert outcome == Outcome.conflict("A user with this email already exists.")


async def test_email_of_deleted_user_stays_taken(repository):
    user = (await repository.create(_user())).value
    await repository.delete(user.user_id)
    outcome = await repository.create(_user())
    assert outcome.status is StatusCode.CONFLICT


async def test_unknown_role_is_not_found(repository):
    outcome = await repository.create(_user(role_id=9))
    assert outcome == Outcome.not_found("The specified role does not exist.")


async def test_get_by_email(repository):
    user = (await repository.create(_user())).value
    assert (await repository.get_by_email("alex@example.com")).value.user_id == user.user_id
    missing = await repository.get_by_email("nobody@example.com")
    assert missing == Outcome.not_found("User with email: nobody@example.com does not exist")


async def test_update_name_and_email(repository):
    user = (await repository.create(_user())).value
    outcome = await repository.update(
        replace(user, name="Alexandra", email="alexandra@example.com", version=0)
    )
    assert outcome.status is StatusCode.OK
    assert (outcome.value.name, outcome.value.email) == ("Alexandra", "alexandra@example.com")
    assert outcome.value.version == 2
    assert outcome.value.password_hash == "$argon2id$hash"


async def test_update_to_taken_email_is_conflict(repository):
    await repository.create(_user("first@example.com"))
    second = (await repository.create(_user("second@example.com"))).value
    outcome = await repository.update(replace(second, email="first@example.com", version=0))
    assert outcome == Outcome.conflict("A user with this email already exists.")


async def test_update_ignores_role_and_hash(repository):
    user = (await repository.create(_user())).value
    outcome = await repository.update(
        User(
            user_id=user.user_id,
            name="Alex",
            email="alex@example.com",
            password_hash=None,
            role_id=UserRole.ORGANIZER.value,
            version=0,
        )
    )
    assert outcome.value.role_id == UserRole.VOLUNTEER.value
    assert outcome.value.password_hash == "$argon2id$hash"


async def test_update_password(repository):
    user = (await repository.create(_user())).value
    assert await repository.update_password(user.user_id, "$argon2id$new") == Outcome.ok(True)
    refreshed = (await repository.get_by_id(user.user_id)).value
    assert refreshed.password_hash == "$argon2id$new"
    assert refreshed.version == user.version + 1


async def test_update_password_missing_user(repository):
    assert (await repository.update_password(404, "$argon2id$new")).status is StatusCode.NOT_FOUND


async def test_soft_delete(repository):
    user = (await repository.create(_user())).value
    deleted = await repository.delete(user.user_id)
    assert deleted.value.is_deleted is True
    assert (await repository.get_by_id(user.user_id)).status is StatusCode.NOT_FOUND
    assert (await repository.get_all()).value == []
    assert (await repository.get_by_email("alex@example.com")).status is StatusCode.NOT_FOUND
