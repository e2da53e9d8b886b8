"""Apply durations to epochs.

Fixed-length units are plain second offsets. Months and years go through the
civil calendar: the month or year field is moved, the day is clamped to the
length of the resulting month, and the time of day is kept. Clamping loses
information, so calendar shifts are not always invertible::

    2024-01-31 +1M -> 2024-02-29
    2024-02-29 -1M -> 2024-01-29
"""

from dataclasses import replace

from epoch_time.civil import CivilDateTime, days_in_month
from epoch_time.duration import Duration, Unit
from epoch_time.epoch import check_epoch
from epoch_time.errors import EpochOverflow
from epoch_time.util import EPOCH_MAX, EPOCH_MIN


def _checked(result: int, epoch: int, offset: object) -> int:
    if not EPOCH_MIN <= result <= EPOCH_MAX:
        raise EpochOverflow(
            f"Applying {offset} to epoch {epoch} overflows the 64-bit epoch range",
            epoch,
        )
    return result


def _move(civil: CivilDateTime, year: int, month: int) -> CivilDateTime:
    """Move ``civil`` to ``year``/``month``, clamping the day to fit."""
    day = min(civil.day, days_in_month(year, month))
    return replace(civil, year=year, month=month, day=day)


def add_months(epoch: int, months: int) -> int:
    """Shift ``epoch`` by calendar months, carrying into the year as needed.

    >>> from epoch_time.iso8601 import format_iso8601, parse_iso8601
    >>> format_iso8601(add_months(parse_iso8601("2024-01-31T00:00:00Z"), 1))
    '2024-02-29T00:00:00Z'
    """
    civil = CivilDateTime.from_epoch(check_epoch(epoch))
    year, month0 = divmod(civil.year * 12 + civil.month - 1 + months, 12)
    moved = _move(civil, year, month0 + 1)
    return _checked(moved.to_epoch(), epoch, f"{months:+d}M")


def add_years(epoch: int, years: int) -> int:
    """Shift ``epoch`` by calendar years. Feb 29 clamps to Feb 28."""
    civil = CivilDateTime.from_epoch(check_epoch(epoch))
    moved = _move(civil, civil.year + years, civil.month)
    return _checked(moved.to_epoch(), epoch, f"{years:+d}Y")


def shift(epoch: int, duration: Duration) -> int:
    """Apply ``duration`` to ``epoch`` and return the new epoch.

    Raises:
        InvalidEpoch: If ``epoch`` is outside the 64-bit range.
        EpochOverflow: If the result is outside the 64-bit range.
    """
    if duration.unit is Unit.MONTH:
        return add_months(epoch, duration.magnitude)
    if duration.unit is Unit.YEAR:
        return add_years(epoch, duration.magnitude)
    check_epoch(epoch)
    return _checked(epoch + duration.total_seconds(), epoch, duration)


__all__ = ["add_months", "add_years", "shift"]
