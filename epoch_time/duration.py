"""Offset tokens such as ``+7d``, ``-1M`` or ``+1Y``.

A token is an optional sign, a run of decimal digits and exactly one unit
letter. Letters are case-sensitive: ``m`` is minutes and ``M`` is months.

Fixed-length units convert to an exact number of seconds. Calendar units
(months, years) do not, and are resolved against a date by
:func:`epoch_time.arithmetic.shift`.
"""

import re
from dataclasses import dataclass
from enum import Enum

from epoch_time.errors import InvalidDuration
from epoch_time.util import DAY, EPOCH_MAX, EPOCH_MIN, HOUR, MINUTE, SECOND, WEEK

_TOKEN = re.compile(
    r"(?P<sign>[+-]?)(?P<digits>[0-9]*)(?P<unit>.?)(?P<rest>.*)", re.DOTALL
)
# A leading "+" always marks an offset; "-" alone may start a negative epoch
_SHAPE = re.compile(r"\+|[+-]?[0-9]+[A-Za-z]")

_EXPECTED = "expected [+|-]<digits><unit> with unit one of s, m, h, d, w, M, Y"


class Unit(Enum):
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    MONTH = "M"
    YEAR = "Y"

    @property
    def is_calendar(self) -> bool:
        """True for units whose length depends on the date they apply to."""
        return self in (Unit.MONTH, Unit.YEAR)

    @property
    def seconds(self) -> int | None:
        """Length of one unit in seconds, or None for calendar units."""
        return _UNIT_SECONDS.get(self)


_UNIT_SECONDS = {
    Unit.SECOND: SECOND,
    Unit.MINUTE: MINUTE,
    Unit.HOUR: HOUR,
    Unit.DAY: DAY,
    Unit.WEEK: WEEK,
}


@dataclass(frozen=True, kw_only=True)
class Duration:
    magnitude: int
    unit: Unit

    def total_seconds(self) -> int:
        """Exact length in seconds. Only defined for fixed-length units."""
        if self.unit.seconds is None:
            raise TypeError(
                f"{self} has no fixed length in seconds; "
                f"apply it to an epoch with shift() instead"
            )
        return self.magnitude * self.unit.seconds

    def __neg__(self) -> "Duration":
        return Duration(magnitude=-self.magnitude, unit=self.unit)

    def __str__(self) -> str:
        sign = "-" if self.magnitude < 0 else "+"
        return f"{sign}{abs(self.magnitude)}{self.unit.value}"


def parse_duration(token: str) -> Duration:
    """Parse an offset token into a :class:`Duration`.

    A missing sign means ``+``. Surrounding whitespace is ignored.

    Raises:
        InvalidDuration: If the token does not match the grammar or the
            magnitude does not fit in a signed 64-bit integer.

    Examples:
        >>> parse_duration("+7d")
        Duration(magnitude=7, unit=<Unit.DAY: 'd'>)
        >>> parse_duration("-1M")
        Duration(magnitude=-1, unit=<Unit.MONTH: 'M'>)
    """
    text = token.strip()
    if not text:
        raise InvalidDuration(f"Empty duration; {_EXPECTED}", token)

    match = _TOKEN.fullmatch(text)
    assert match is not None  # every group is optional
    sign, digits, letter, rest = match.group("sign", "digits", "unit", "rest")

    if not digits:
        raise InvalidDuration(
            f"Invalid duration {token!r}: missing digits; {_EXPECTED}", token
        )
    if not letter:
        raise InvalidDuration(
            f"Invalid duration {token!r}: missing unit; {_EXPECTED}", token
        )
    try:
        unit = Unit(letter)
    except ValueError as err:
        raise InvalidDuration(
            f"Invalid duration {token!r}: unknown unit {letter!r}; {_EXPECTED}",
            token,
        ) from err
    if rest:
        raise InvalidDuration(
            f"Invalid duration {token!r}: unexpected {rest!r} after the unit; "
            f"{_EXPECTED}",
            token,
        )

    # More than 19 significant digits cannot fit in 64 bits
    if len(digits.lstrip("0")) <= 19:
        magnitude = -int(digits) if sign == "-" else int(digits)
        if EPOCH_MIN <= magnitude <= EPOCH_MAX:
            return Duration(magnitude=magnitude, unit=unit)
    raise InvalidDuration(
        f"Invalid duration {token!r}: magnitude out of range "
        f"[{EPOCH_MIN}, {EPOCH_MAX}]",
        token,
    )


def looks_like_duration(token: str) -> bool:
    """Return True if ``token`` is shaped like an offset rather than an epoch.

    Only the shape is checked: a leading ``+``, or digits followed by a
    letter. ``"5x"`` and ``"+5"`` count and fail later in
    :func:`parse_duration` with a useful message. Plain and negative integers
    and keywords such as ``"now"`` do not count.
    """
    return _SHAPE.match(token.strip()) is not None


__all__ = ["Duration", "Unit", "looks_like_duration", "parse_duration"]
