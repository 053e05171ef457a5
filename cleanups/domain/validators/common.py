"""Shared rule checks. Pure functions, no infrastructure or DB access."""

from datetime import datetime
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from cleanups.core.outcome import Outcome

# Bounds mirror the column sizes of the store.
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 50

VALID = Outcome.ok(True)


def is_positive_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def is_valid_email(email: str) -> bool:
    """Conservative syntax check; no DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def same_tz_awareness(first: datetime, second: datetime) -> bool:
    return (first.tzinfo is None) == (second.tzinfo is None)


def validate_id(value: Any, label: str) -> Outcome[bool]:
    if not is_positive_id(value):
        return Outcome.bad_request(f"{label} must be greater than zero.")
    return VALID


def validate_version(version: Optional[int]) -> Optional[Outcome[bool]]:
    if version is not None and not is_positive_id(version):
        return Outcome.bad_request("Version must be greater than zero.")
    return None


def validate_password(password: Optional[str]) -> Optional[Outcome[bool]]:
    if is_blank(password):
        return Outcome.bad_request("Password is required.")
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return Outcome.bad_request(
            f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters long."
        )
    return None
