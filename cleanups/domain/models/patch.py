"""Explicit partial-update value: the owned columns whose values changed."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class Patch:
    changes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def between(cls, current: object, incoming: object, fields: Iterable[str]) -> "Patch":
        """Collect ``fields`` whose value on ``incoming`` differs from ``current``."""
        changes = {}
        for name in fields:
            new_value = getattr(incoming, name)
            if getattr(current, name) != new_value:
                changes[name] = new_value
        return cls(changes=changes)

    def __bool__(self) -> bool:
        return bool(self.changes)

    def __contains__(self, name: str) -> bool:
        return name in self.changes
