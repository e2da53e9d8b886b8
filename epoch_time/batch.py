"""Batch processing of epoch literals streamed one per line.

Each non-blank line is parsed as an epoch, optionally shifted, and rendered
back as a string, in input order. What happens on a malformed line is set by
the ``on_error`` policy:

- ``"abort"``: stop at the first bad line by raising :class:`BatchAborted`.
  Results for earlier lines have already been yielded.
- ``"skip"``: log a warning naming the line, record it on the
  :class:`BatchReport` and carry on.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from epoch_time.arithmetic import shift
from epoch_time.duration import Duration
from epoch_time.epoch import parse_epoch
from epoch_time.errors import BatchAborted, EpochTimeError

OnError: TypeAlias = Literal["abort", "skip"]

ON_ERROR_CHOICES: tuple[OnError, ...] = ("abort", "skip")

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    """Running tally for one batch: lines seen and lines that failed."""

    total: int = 0
    failures: list[tuple[int, EpochTimeError]] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.total - len(self.failures)


def process_lines(
    lines: Iterable[str],
    duration: Duration | None = None,
    *,
    on_error: OnError = "abort",
    report: BatchReport | None = None,
) -> Iterator[str]:
    """Yield one output line per non-blank input line.

    Args:
        lines: Epoch literals, one per item. Trailing newlines are fine.
        duration: Offset applied to every epoch, if any.
        on_error: ``"abort"`` or ``"skip"``, see the module docstring.
        report: Collects counts and failures; pass one in to inspect them.

    Raises:
        BatchAborted: On the first bad line under the ``"abort"`` policy.
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(
            f"Invalid on_error policy: {on_error!r}\n"
            f"Valid policies: {', '.join(ON_ERROR_CHOICES)}"
        )
    if report is None:
        report = BatchReport()

    for number, line in enumerate(lines, start=1):
        literal = line.strip()
        if not literal:
            continue
        report.total += 1
        try:
            epoch = parse_epoch(literal)
            if duration is not None:
                epoch = shift(epoch, duration)
        except EpochTimeError as err:
            if on_error == "abort":
                raise BatchAborted(number, err) from err
            logger.warning("line %d: %s", number, err)
            report.failures.append((number, err))
            continue
        yield str(epoch)

    logger.debug(
        "batch done: %d processed, %d skipped", report.processed, len(report.failures)
    )


__all__ = ["BatchReport", "ON_ERROR_CHOICES", "OnError", "process_lines"]
