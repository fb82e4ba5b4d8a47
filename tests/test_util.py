from datetime import datetime, timedelta, timezone

import pytest

from pytollcalculator.exceptions import ValidationError
from pytollcalculator.util import (
    mask_license_plate,
    minutes_between,
    normalize_license_plate,
    normalize_passings,
    parse_timestamp,
)


def test_normalize_license_plate() -> None:
    assert normalize_license_plate(" ab-12 cd ") == "AB12CD"


def test_normalize_license_plate_invalid() -> None:
    with pytest.raises(ValidationError):
        normalize_license_plate("!!!")


def test_mask_license_plate() -> None:
    assert mask_license_plate("AB12CD") == "AB**CD"
    assert mask_license_plate("ABC") == "A*C"
    assert mask_license_plate(None) == "***"


def test_parse_timestamp_keeps_offset() -> None:
    parsed = parse_timestamp("2013-02-07T07:15:00+01:00")
    assert parsed.hour == 7
    assert parsed.utcoffset() == timedelta(hours=1)


def test_parse_timestamp_accepts_z_suffix() -> None:
    assert parse_timestamp("2013-02-07T07:15:00Z").tzinfo == timezone.utc


def test_parse_timestamp_allows_naive() -> None:
    assert parse_timestamp("2013-02-07T07:15:00.250").tzinfo is None


@pytest.mark.parametrize("value", ["", "not a timestamp", None])
def test_parse_timestamp_invalid(value) -> None:
    with pytest.raises(ValidationError):
        parse_timestamp(value)


def test_normalize_passings_sorts() -> None:
    late = datetime(2013, 2, 7, 9, 0)
    early = datetime(2013, 2, 7, 7, 0)
    assert normalize_passings([late, "2013-02-07T07:00:00"]) == [early, late]


def test_normalize_passings_empty() -> None:
    assert normalize_passings([]) == []


def test_normalize_passings_rejects_single_timestamp() -> None:
    with pytest.raises(ValidationError):
        normalize_passings("2013-02-07T07:00:00")


def test_minutes_between_truncates() -> None:
    start = datetime(2013, 2, 7, 7, 0, 0)
    assert minutes_between(start, datetime(2013, 2, 7, 8, 0, 59)) == 60
    assert minutes_between(start, datetime(2013, 2, 7, 8, 1, 0)) == 61
    assert minutes_between(start, start + timedelta(milliseconds=999)) == 0
