"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta

from .exceptions import ValidationError

_LICENSE_PLATE_RE = re.compile(r"[^A-Z0-9]")
_ONE_MINUTE = timedelta(minutes=1)

Passing = datetime | str


def normalize_license_plate(plate: str) -> str:
    if not isinstance(plate, str):
        raise ValidationError("License plate must be a string.")
    normalized = _LICENSE_PLATE_RE.sub("", plate.upper())
    if not normalized:
        raise ValidationError("License plate is empty after normalization.")
    return normalized


def mask_license_plate(plate: str | None) -> str:
    if not isinstance(plate, str):
        return "***"
    normalized = _LICENSE_PLATE_RE.sub("", plate.upper())
    if not normalized:
        return "***"
    if len(normalized) <= 2:
        return "*" * len(normalized)
    if len(normalized) <= 4:
        return f"{normalized[:1]}{'*' * (len(normalized) - 2)}{normalized[-1:]}"
    masked = "*" * (len(normalized) - 4)
    return f"{normalized[:2]}{masked}{normalized[-2:]}"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 passing timestamp.

    Naive values are kept naive and read as local policy time; offsets are
    kept as given so the wall-clock hour stays the one seen at the gate.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Timestamp must be a non-empty string.")
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError("Timestamp is not a valid ISO 8601 value.") from exc


def ensure_datetime(value: Passing) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_timestamp(value)
    raise ValidationError("Passing must be a datetime or an ISO 8601 string.")


def normalize_passings(passings: Iterable[Passing]) -> list[datetime]:
    """Return passings as datetimes for a single day in chronological order."""
    if passings is None:
        raise ValidationError("Passings are required.")
    if isinstance(passings, (str, datetime)):
        raise ValidationError("Passings must be a sequence of timestamps.")
    parsed = [ensure_datetime(value) for value in passings]
    if not parsed:
        return []
    aware = {value.tzinfo is not None for value in parsed}
    if len(aware) > 1:
        raise ValidationError("Passings must not mix naive and timezone-aware timestamps.")
    days = {value.date() for value in parsed}
    if len(days) > 1:
        raise ValidationError("Passings must all fall on the same calendar day.")
    return sorted(parsed)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed from start to end."""
    return (end - start) // _ONE_MINUTE
