"""Epoch literals and the system clock."""

import re
import time

from epoch_time.errors import InvalidEpoch
from epoch_time.util import EPOCH_MAX, EPOCH_MIN

_LITERAL = re.compile(r"[+-]?[0-9]+")


def check_epoch(epoch: int) -> int:
    """Return ``epoch`` unchanged if it fits in a signed 64-bit integer."""
    if not EPOCH_MIN <= epoch <= EPOCH_MAX:
        raise InvalidEpoch(
            f"Epoch {epoch} is outside the supported range "
            f"[{EPOCH_MIN}, {EPOCH_MAX}]",
            epoch,
        )
    return epoch


def parse_epoch(text: str) -> int:
    """Parse an integer epoch literal such as ``"1704912345"`` or ``"-86400"``."""
    literal = text.strip()
    if not _LITERAL.fullmatch(literal):
        raise InvalidEpoch(
            f"Invalid epoch {text!r}: expected an integer number of seconds "
            f"since 1970-01-01T00:00:00Z",
            text,
        )
    if len(literal.lstrip("+-").lstrip("0")) > 19:
        raise InvalidEpoch(
            f"Epoch {text.strip()} is outside the supported range "
            f"[{EPOCH_MIN}, {EPOCH_MAX}]",
            text,
        )
    return check_epoch(int(literal))


def now() -> int:
    """Current epoch in whole seconds."""
    return time.time_ns() // 1_000_000_000


__all__ = ["check_epoch", "now", "parse_epoch"]
