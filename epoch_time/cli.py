"""The ``et`` command: print and manipulate Unix epoch timestamps."""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

import click

from epoch_time.arithmetic import shift
from epoch_time.batch import ON_ERROR_CHOICES, BatchReport, OnError, process_lines
from epoch_time.duration import Duration, looks_like_duration, parse_duration
from epoch_time.epoch import now, parse_epoch
from epoch_time.errors import EpochTimeError, InvalidDuration
from epoch_time.iso8601 import format_iso8601, parse_iso8601
from epoch_time.log import configure_logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# "-7d", "-1000", "-1v": arguments, never clusters of short options
_NEGATIVE = re.compile(r"-[0-9]")

_EPILOG = """\b
Duration units:
  s  seconds         h  hours          w  weeks
  m  minutes (60s)   d  days (86400s)
  M  months (calendar)   Y  years (calendar)

Calendar units clamp the day to the target month (Jan 31 +1M = Feb 28/29).

\b
Examples:
  et                         Print the current epoch
  et -7d                     Subtract 7 days from now
  et +1M                     Add 1 month to now
  et 1704912345 +1h          Add 1 hour to the given epoch
  et now -1Y                 Subtract 1 year from now
  et parse 2026-01-05T12:00:00Z
  et format 1704912345
  echo 1704912345 | et -1d   Shift every epoch read from stdin
"""


@dataclass(frozen=True, kw_only=True)
class Settings:
    on_error: OnError = "abort"
    log_level: str = "WARNING"


def _resolve_log_level(verbose: int, log_level: str | None) -> str:
    if log_level is not None:
        return log_level.upper()
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return "WARNING"


def _expect(args: list[str], count: int, usage: str) -> None:
    if len(args) != count:
        raise click.UsageError(f"expected: et {usage}")


def _single_offset(token: str) -> Duration:
    """Parse the lone offset in ``et <offset>``, which needs a sign."""
    if token.strip()[:1] not in ("+", "-"):
        raise InvalidDuration(
            f"Offset {token!r} needs an explicit sign, e.g. +{token.strip()} "
            f"or -{token.strip()}; a bare number is read as an epoch",
            token,
        )
    return parse_duration(token)


def _stdin_or_now(
    duration: Duration | None, settings: Settings, report: BatchReport
) -> Iterator[str]:
    """Shift every epoch piped on stdin, or the current time if none were."""
    # Undecodable bytes become U+FFFD and fail as an invalid epoch on their line
    stdin = click.open_file("-", errors="replace")
    if not stdin.isatty():
        logger.debug("reading epochs from stdin")
        yield from process_lines(
            stdin, duration, on_error=settings.on_error, report=report
        )
        if report.total:
            return
        logger.debug("stdin was empty, falling back to the current time")
    epoch = now()
    yield str(shift(epoch, duration) if duration is not None else epoch)


def _dispatch(
    args: list[str], settings: Settings, report: BatchReport
) -> Iterator[str]:
    """Yield the output lines for one invocation."""
    command = args[0] if args else None

    if command == "parse":
        _expect(args, 2, "parse <iso8601>")
        yield str(parse_iso8601(args[1]))
    elif command == "format":
        _expect(args, 2, "format <epoch>")
        yield format_iso8601(parse_epoch(args[1]))
    elif command == "now":
        if len(args) > 2:
            raise click.UsageError("expected: et now [<offset>]")
        epoch = now()
        yield str(shift(epoch, parse_duration(args[1])) if len(args) == 2 else epoch)
    elif not args:
        yield from _stdin_or_now(None, settings, report)
    elif len(args) == 1 and looks_like_duration(args[0]):
        yield from _stdin_or_now(_single_offset(args[0]), settings, report)
    elif len(args) == 1:
        yield str(parse_epoch(args[0]))
    elif len(args) == 2:
        epoch = parse_epoch(args[0])
        duration = parse_duration(args[1])
        logger.debug("shifting %d by %s", epoch, duration)
        yield str(shift(epoch, duration))
    else:
        raise click.UsageError("expected: et [<epoch>|now] [<offset>]")


class EtCommand(click.Command):
    """A command whose negative epochs and offsets are never read as options.

    Option tokens (and the values of options that take one) are moved in
    front of a ``--`` separator. Everything else, including any token
    starting with ``-`` and a digit, follows it as an argument, in order.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        takes_value = {
            name
            for param in self.get_params(ctx)
            if isinstance(param, click.Option) and not (param.is_flag or param.count)
            for name in param.opts
        }
        options: list[str] = []
        arguments: list[str] = []
        tokens = iter(args)
        for token in tokens:
            if token == "--":
                arguments.extend(tokens)
            elif token == "-" or not token.startswith("-") or _NEGATIVE.match(token):
                arguments.append(token)
            else:
                options.append(token)
                if token in takes_value:
                    value = next(tokens, None)
                    if value is not None:
                        options.append(value)
        return super().parse_args(ctx, [*options, "--", *arguments])


@click.command(cls=EtCommand, epilog=_EPILOG)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--on-error",
    type=click.Choice(ON_ERROR_CHOICES),
    default="abort",
    show_default=True,
    envvar="ET_ON_ERROR",
    help="What to do with a malformed stdin line: stop, or warn and continue.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log more to stderr (-v info, -vv debug).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    envvar="ET_LOG_LEVEL",
    help="Explicit log level; overrides -v.",
)
@click.version_option(package_name="epoch-time", prog_name="et")
def main(
    args: tuple[str, ...], on_error: OnError, verbose: int, log_level: str | None
) -> None:
    """Print and manipulate Unix epoch timestamps (UTC).

    \b
    et [<epoch>|now] [<offset>]
    et parse <iso8601>
    et format <epoch>
    """
    settings = Settings(
        on_error=on_error, log_level=_resolve_log_level(verbose, log_level)
    )
    configure_logging(settings.log_level)

    report = BatchReport()
    try:
        for line in _dispatch(list(args), settings, report):
            click.echo(line)
    except EpochTimeError as err:
        raise click.ClickException(str(err)) from err

    if report.failures:
        raise click.ClickException(
            f"{len(report.failures)} of {report.total} input lines could not be "
            f"processed"
        )


__all__ = ["EtCommand", "Settings", "main"]
