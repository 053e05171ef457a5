"""Marker bases for wire-facing request/response shapes."""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Capability marker: 'is a DTO'. Immutable once built."""

    model_config = ConfigDict(frozen=True)


class CreateRequest(WireModel):
    pass


class UpdateRequest(WireModel):
    pass


class Response(WireModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)


ResponseT = TypeVar("ResponseT", bound=Response)
