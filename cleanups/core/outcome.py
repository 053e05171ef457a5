"""Status-coded result type shared by validators, repositories and services.

An ``Outcome`` carries either a value (2xx with data), nothing (204/304) or an
error message (4xx/5xx). It is the only channel for reporting failure between
layers; none of the layers raise across their boundary.
"""

from enum import IntEnum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class StatusCode(IntEnum):
    """HTTP-like status classes an Outcome can carry."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500


_WITH_VALUE = frozenset({StatusCode.OK, StatusCode.CREATED})


class Outcome(Generic[T]):
    """
    Immutable result of an operation. Build with the named factories
    (``Outcome.ok(value)``, ``Outcome.not_found("...")``...), never directly.
    """

    __slots__ = ("_status", "_value", "_error")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(
            "Outcome cannot be constructed directly; use a factory such as Outcome.ok(value)"
        )

    @classmethod
    def _build(
        cls,
        status: StatusCode,
        value: Optional[T] = None,
        error: Optional[str] = None,
    ) -> "Outcome[T]":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_status", status)
        object.__setattr__(instance, "_value", value)
        object.__setattr__(instance, "_error", error)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Outcome is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Outcome is immutable")

    # --- success with value ---

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls._build(StatusCode.OK, value=value)

    @classmethod
    def created(cls, value: T) -> "Outcome[T]":
        return cls._build(StatusCode.CREATED, value=value)

    # --- success without value ---

    @classmethod
    def no_content(cls) -> "Outcome[T]":
        return cls._build(StatusCode.NO_CONTENT)

    @classmethod
    def not_modified(cls) -> "Outcome[T]":
        return cls._build(StatusCode.NOT_MODIFIED)

    # --- failures ---

    @classmethod
    def bad_request(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.BAD_REQUEST, error=message)

    @classmethod
    def unauthorized(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.UNAUTHORIZED, error=message)

    @classmethod
    def forbidden(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.FORBIDDEN, error=message)

    @classmethod
    def not_found(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.NOT_FOUND, error=message)

    @classmethod
    def conflict(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.CONFLICT, error=message)

    @classmethod
    def internal_server_error(cls, message: str) -> "Outcome[T]":
        return cls._build(StatusCode.INTERNAL_SERVER_ERROR, error=message)

    # --- accessors ---

    @property
    def status(self) -> StatusCode:
        return self._status

    @property
    def status_code(self) -> int:
        return int(self._status)

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_success(self) -> bool:
        return 200 <= self._status < 300

    def transform(self, fn: Callable[[T], R]) -> "Outcome[R]":
        """
        Map the value of a 200/201 outcome through ``fn``. Valueless successes and
        failures are forwarded with the same status (and message). A 200/201
        outcome that carries ``None`` becomes a 500.
        """
        if self._status in _WITH_VALUE:
            if self._value is None:
                return Outcome._build(
                    StatusCode.INTERNAL_SERVER_ERROR,
                    error="Data is null for status code that should have data.",
                )
            return Outcome._build(self._status, value=fn(self._value))
        if self.is_success:
            return Outcome._build(self._status)
        return Outcome._build(self._status, error=self._error)

    def forward(self) -> "Outcome[Any]":
        """Re-type a failure (or valueless success) so it can be forwarded unchanged."""
        return Outcome._build(self._status, error=self._error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (
            self._status == other._status
            and self._value == other._value
            and self._error == other._error
        )

    def __hash__(self) -> int:
        try:
            return hash((self._status, self._value, self._error))
        except TypeError:
            return hash((self._status, self._error))

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Outcome({self._status.name}, error={self._error!r})"
        return f"Outcome({self._status.name}, value={self._value!r})"
