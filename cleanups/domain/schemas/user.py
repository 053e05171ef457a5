"""Pydantic schemas for users. Password hashes never appear on the wire."""

from datetime import datetime
from typing import Optional

from cleanups.domain.models.user import UserRole
from cleanups.domain.schemas.base import CreateRequest, Response, UpdateRequest, WireModel


class CreateUserRequest(CreateRequest):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateUserRequest(UpdateRequest):
    user_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    version: Optional[int] = None


class ChangePasswordRequest(WireModel):
    user_id: Optional[int] = None
    new_password: Optional[str] = None


class UserResponse(Response):
    user_id: int
    name: str
    email: str
    role: UserRole
    created_date: Optional[datetime] = None
    version: int
