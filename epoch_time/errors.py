"""Exception hierarchy for epoch-time.

All errors raised by the package inherit from :class:`EpochTimeError`, which
is itself a :class:`ValueError` so callers that only care about bad input can
catch that instead. Every error keeps the offending input on ``.value``.
"""

from typing import Any


class EpochTimeError(ValueError):
    """Base exception for all epoch-time errors."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value: Any = value


class InvalidDuration(EpochTimeError):
    """Malformed offset token.

    Examples:
        - Empty token or a bare sign (``""``, ``"+"``)
        - Missing or unknown unit letter (``"10"``, ``"10x"``)
        - Trailing characters after the unit (``"5s5"``)
    """


class InvalidTimestamp(EpochTimeError):
    """Malformed or out-of-range ISO-8601 input.

    Examples:
        - Missing ``Z`` designator or a numeric UTC offset
        - Month 13, day 32, hour 24
    """


class InvalidEpoch(EpochTimeError):
    """Non-integer or out-of-range epoch literal."""


class EpochOverflow(EpochTimeError):
    """Arithmetic result does not fit in a signed 64-bit epoch."""


class BatchAborted(EpochTimeError):
    """A line of batch input failed while running under the abort policy."""

    def __init__(self, line_number: int, cause: EpochTimeError):
        super().__init__(f"line {line_number}: {cause}", cause.value)
        self.line_number: int = line_number
        self.cause: EpochTimeError = cause


__all__ = [
    "EpochTimeError",
    "InvalidDuration",
    "InvalidTimestamp",
    "InvalidEpoch",
    "EpochOverflow",
    "BatchAborted",
]
