"""Civil (calendar and clock) representation of epochs in UTC.

Dates use the proleptic Gregorian calendar with astronomical year numbering,
so year 0 exists and years may be negative. Conversion works on plain integer
arithmetic and is exact for any integer epoch, well beyond the range of
:class:`datetime.datetime`.
"""

from dataclasses import dataclass

from epoch_time.util import DAY, HOUR, MINUTE

# Index 0 is unused, months are 1-indexed
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days in a 400-year Gregorian cycle
_DAYS_PER_ERA = 146097

# Days from 0000-03-01 to 1970-01-01
_UNIX_EPOCH_SHIFT = 719468


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years.

    >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
    (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Count days from 1970-01-01 to the given date (negative before it).

    Years are shifted to start in March so the leap day falls at the end of
    the computational year.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    doy = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _UNIX_EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`."""
    z = days + _UNIX_EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400
    return (year + 1 if month <= 2 else year), month, day


@dataclass(frozen=True, kw_only=True)
class CivilDateTime:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be 1-12, got {self.month}")
        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise ValueError(
                f"day must be 1-{max_day} for {self.year}-{self.month:02d}, "
                f"got {self.day}"
            )
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be 0-23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be 0-59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second must be 0-59, got {self.second}")

    @classmethod
    def from_epoch(cls, epoch: int) -> "CivilDateTime":
        days, seconds = divmod(epoch, DAY)
        year, month, day = civil_from_days(days)
        hour, seconds = divmod(seconds, HOUR)
        minute, second = divmod(seconds, MINUTE)
        return cls(
            year=year, month=month, day=day, hour=hour, minute=minute, second=second
        )

    def to_epoch(self) -> int:
        days = days_from_civil(self.year, self.month, self.day)
        return days * DAY + self.hour * HOUR + self.minute * MINUTE + self.second


__all__ = [
    "CivilDateTime",
    "civil_from_days",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
]
