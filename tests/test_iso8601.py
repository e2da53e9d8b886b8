"""Tests for ISO 8601 parsing and formatting."""

from datetime import datetime, timezone

import pytest

from epoch_time import InvalidEpoch, InvalidTimestamp, format_iso8601, parse_iso8601
from epoch_time.util import EPOCH_MAX, EPOCH_MIN


def test_format_known_epochs():
    """Test formatting of a few well-known instants."""
    assert format_iso8601(0) == "1970-01-01T00:00:00Z"
    assert format_iso8601(1704888000) == "2024-01-10T12:00:00Z"
    assert format_iso8601(-86400) == "1969-12-31T00:00:00Z"
    assert format_iso8601(-1) == "1969-12-31T23:59:59Z"
    assert format_iso8601(1767614400) == "2026-01-05T12:00:00Z"


def test_parse_known_timestamps():
    """Test parsing of a few well-known instants."""
    assert parse_iso8601("2024-01-10T12:00:00Z") == 1704888000
    assert parse_iso8601("1970-01-01T00:00:00Z") == 0
    assert parse_iso8601("  2026-01-05T12:00:00Z\n") == 1767614400


def test_parse_agrees_with_datetime():
    """Test parsed epochs against the standard library."""
    for text in [
        "2000-02-29T23:59:59Z",
        "1900-01-01T00:00:00Z",
        "0001-01-01T00:00:00Z",
    ]:
        dt = datetime.strptime(text, "%Y-%m-%dT%H:%M:%SZ")
        dt = dt.replace(tzinfo=timezone.utc)
        assert parse_iso8601(text) == int(dt.timestamp())


def test_round_trip_from_epochs():
    """Test parse(format(e)) == e, including the 64-bit extremes."""
    epochs = [
        0, 1, -1, 1704912345, -62135596800, -62135596801, 253402300800,
        EPOCH_MIN, EPOCH_MAX,
    ]
    for epoch in epochs:
        assert parse_iso8601(format_iso8601(epoch)) == epoch


@pytest.mark.parametrize(
    "text",
    [
        "2024-02-29T00:00:00Z",
        "1999-12-31T23:59:59Z",
        "0000-01-01T00:00:00Z",
        "9999-12-31T23:59:59Z",
        "+10000-01-01T00:00:00Z",
        "-0001-12-31T00:00:00Z",
        "-12345-06-15T01:02:03Z",
    ],
)
def test_round_trip_from_strings(text: str) -> None:
    """Test format(parse(s)) == s for canonical strings."""
    assert format_iso8601(parse_iso8601(text)) == text


def test_expanded_years():
    """Test that years outside 0000-9999 carry a sign and at least four digits."""
    assert format_iso8601(253402300800) == "+10000-01-01T00:00:00Z"
    assert format_iso8601(-62167219201) == "-0001-12-31T23:59:59Z"
    assert format_iso8601(EPOCH_MAX) == "+292277026596-12-04T15:30:07Z"
    assert format_iso8601(EPOCH_MIN) == "-292277022657-01-27T08:29:52Z"


@pytest.mark.parametrize(
    "text,message",
    [
        ("2024-13-01T00:00:00Z", "month must be 1-12"),
        ("2024-00-10T00:00:00Z", "month must be 1-12"),
        ("2024-01-32T00:00:00Z", "day must be 1-31"),
        ("2023-02-29T00:00:00Z", "day must be 1-28"),
        ("2024-01-01T24:00:00Z", "hour must be 0-23"),
        ("2024-01-01T25:00:00Z", "hour must be 0-23"),
        ("2024-01-01T00:60:00Z", "minute must be 0-59"),
        ("2016-12-31T23:59:60Z", "second must be 0-59"),
    ],
)
def test_parse_rejects_out_of_range_fields(text: str, message: str) -> None:
    """Test that out-of-range components fail instead of being normalized."""
    with pytest.raises(InvalidTimestamp, match=message):
        parse_iso8601(text)


@pytest.mark.parametrize(
    "text,message",
    [
        ("2024-01-01T00:00:00", "missing timezone designator"),
        ("2024-01-10T12:00:00+00:00", "UTC offset '\\+00:00'"),
        ("2024-01-10T12:00:00-05:00", "UTC offset '-05:00'"),
        ("2024-01-10T12:00:00z", "unexpected 'z'"),
        ("2024-01-10T12:00:00.5Z", r"unexpected '\.5Z'"),
    ],
)
def test_parse_requires_utc_designator(text: str, message: str) -> None:
    """Test that only the Z designator is accepted."""
    with pytest.raises(InvalidTimestamp, match=message):
        parse_iso8601(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not-a-date",
        "2024-01-10",
        "2024-01-10 12:00:00Z",
        "2024-1-10T12:00:00Z",
        "2024-01-10T12:00Z",
        "24-01-10T12:00:00Z",
        "+2024-01-10T12:00:00Z",
        "02024-01-10T12:00:00Z",
        "-0000-01-10T12:00:00Z",
        "+010000-01-01T00:00:00Z",
    ],
)
def test_parse_rejects_malformed_strings(text: str) -> None:
    """Test that anything but the canonical form is rejected."""
    with pytest.raises(InvalidTimestamp):
        parse_iso8601(text)


def test_parse_outside_epoch_range():
    """Test that a well-formed timestamp beyond 64 bits is rejected."""
    with pytest.raises(InvalidTimestamp, match="64-bit epoch range"):
        parse_iso8601("+292277026596-12-04T15:30:08Z")
    with pytest.raises(InvalidTimestamp, match="64-bit epoch range"):
        parse_iso8601("+" + "9" * 5000 + "-01-01T00:00:00Z")


def test_format_rejects_out_of_range_epoch():
    """Test that formatting checks the epoch range."""
    with pytest.raises(InvalidEpoch):
        format_iso8601(EPOCH_MAX + 1)
