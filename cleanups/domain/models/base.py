"""Marker base for domain entities and shared helpers. No ORM or infrastructure."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TypeVar


@dataclass
class DomainModel:
    """Capability marker: 'is a store-backed entity'. Carries no behaviour."""


EntityT = TypeVar("EntityT", bound=DomainModel)


def utcnow() -> datetime:
    """Naive UTC timestamp; the store keeps timestamps without offset."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
