"""ISO 8601 parsing and formatting for UTC epochs.

Only one shape is supported, in both directions::

    YYYY-MM-DDTHH:MM:SSZ

Years 0000-9999 are written with exactly four digits. Other years use the
ISO 8601 expanded representation: an explicit sign and at least four digits,
e.g. ``+10000-01-01T00:00:00Z`` or ``-0001-12-31T00:00:00Z``. The parser
accepts exactly what the formatter produces, so for every epoch ``e`` and
every accepted string ``s``::

    parse_iso8601(format_iso8601(e)) == e
    format_iso8601(parse_iso8601(s)) == s
"""

import re

from epoch_time.civil import CivilDateTime
from epoch_time.epoch import check_epoch
from epoch_time.errors import EpochTimeError, InvalidTimestamp

_CANONICAL = re.compile(
    r"(?P<year>[+-]?[0-9]{4,})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?P<zone>.*)",
    re.DOTALL,
)

_EXPECTED = "expected YYYY-MM-DDTHH:MM:SSZ (UTC)"


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):04d}"


def format_iso8601(epoch: int) -> str:
    """Format an epoch as a canonical ISO 8601 UTC string.

    >>> format_iso8601(0)
    '1970-01-01T00:00:00Z'
    >>> format_iso8601(-86400)
    '1969-12-31T00:00:00Z'
    """
    c = CivilDateTime.from_epoch(check_epoch(epoch))
    return (
        f"{_format_year(c.year)}-{c.month:02d}-{c.day:02d}"
        f"T{c.hour:02d}:{c.minute:02d}:{c.second:02d}Z"
    )


def parse_iso8601(text: str) -> int:
    """Parse a canonical ISO 8601 UTC string into an epoch.

    Out-of-range fields are rejected, never normalized: ``2024-02-30`` is an
    error, not March 1st.

    Raises:
        InvalidTimestamp: If the string is malformed, lacks the ``Z``
            designator, has out-of-range fields, or lies outside the 64-bit
            epoch range.

    >>> parse_iso8601("2024-01-10T12:00:00Z")
    1704888000
    """
    s = text.strip()
    match = _CANONICAL.fullmatch(s)
    if match is None:
        raise InvalidTimestamp(f"Invalid timestamp {text!r}: {_EXPECTED}", text)

    zone = match.group("zone")
    if zone != "Z":
        if not zone:
            detail = "missing timezone designator"
        elif zone[0] in "+-":
            detail = f"UTC offset {zone!r}"
        else:
            detail = f"unexpected {zone!r} after the time"
        raise InvalidTimestamp(
            f"Invalid timestamp {text!r}: {detail}; only UTC ('Z') is supported, "
            f"{_EXPECTED}",
            text,
        )

    year_text = match.group("year")
    if len(year_text) > 13:
        raise InvalidTimestamp(
            f"Invalid timestamp {text!r}: outside the 64-bit epoch range", text
        )
    year = int(year_text)
    if _format_year(year) != year_text:
        raise InvalidTimestamp(
            f"Invalid timestamp {text!r}: year {year_text!r} is not canonical; "
            f"use four digits for years 0000-9999 and a sign otherwise",
            text,
        )

    fields = match.group("month", "day", "hour", "minute", "second")
    month, day, hour, minute, second = (int(f) for f in fields)
    try:
        civil = CivilDateTime(
            year=year, month=month, day=day, hour=hour, minute=minute, second=second
        )
    except ValueError as err:
        raise InvalidTimestamp(f"Invalid timestamp {text!r}: {err}", text) from err

    try:
        return check_epoch(civil.to_epoch())
    except EpochTimeError as err:
        raise InvalidTimestamp(
            f"Invalid timestamp {text!r}: outside the 64-bit epoch range", text
        ) from err


__all__ = ["format_iso8601", "parse_iso8601"]
