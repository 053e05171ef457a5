"""Domain models for users, their role, and password reset tokens."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional

from cleanups.domain.models.base import DomainModel


class UserRole(IntEnum):
    """Role of a user. Values are the ids of the seeded role rows."""

    ORGANIZER = 1
    VOLUNTEER = 2

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass
class Role(DomainModel):
    id: int
    name: str


@dataclass
class User(DomainModel):
    user_id: int = 0
    name: str = ""
    email: str = ""
    password_hash: Optional[str] = None
    role_id: int = UserRole.VOLUNTEER.value
    created_date: Optional[datetime] = None
    is_deleted: bool = False
    version: int = 1


USER_MUTABLE_FIELDS = ("name", "email")


@dataclass
class PasswordResetToken(DomainModel):
    id: int = 0
    user_id: int = 0
    token: str = ""
    expiration_date: Optional[datetime] = None
    is_used: bool = False
    created_date: Optional[datetime] = None
