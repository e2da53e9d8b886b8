from .arithmetic import add_months, add_years, shift
from .civil import CivilDateTime, days_in_month, is_leap_year
from .duration import Duration, Unit, looks_like_duration, parse_duration
from .epoch import check_epoch, now, parse_epoch
from .errors import (
    BatchAborted,
    EpochOverflow,
    EpochTimeError,
    InvalidDuration,
    InvalidEpoch,
    InvalidTimestamp,
)
from .iso8601 import format_iso8601, parse_iso8601
from .util import DAY, EPOCH_MAX, EPOCH_MIN, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "Duration",
    "Unit",
    "CivilDateTime",
    "parse_duration",
    "looks_like_duration",
    "shift",
    "add_months",
    "add_years",
    "parse_iso8601",
    "format_iso8601",
    "parse_epoch",
    "check_epoch",
    "now",
    "is_leap_year",
    "days_in_month",
    "EpochTimeError",
    "InvalidDuration",
    "InvalidTimestamp",
    "InvalidEpoch",
    "EpochOverflow",
    "BatchAborted",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "EPOCH_MIN",
    "EPOCH_MAX",
]
