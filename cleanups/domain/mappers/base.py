"""Helpers shared by the entity mappers."""

from typing import Callable, Iterable, List

from cleanups.domain.models.base import EntityT
from cleanups.domain.schemas.base import ResponseT


def map_responses(
    convert: Callable[[EntityT], ResponseT], entities: Iterable[EntityT]
) -> List[ResponseT]:
    return [convert(entity) for entity in entities]
