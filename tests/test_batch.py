"""Tests for batch processing of streamed epochs."""

import logging

import pytest

from epoch_time import BatchAborted, InvalidEpoch, parse_duration
from epoch_time.batch import BatchReport, process_lines


def test_lines_pass_through_in_order():
    """Test one output per input line, in order, with blank lines skipped."""
    lines = ["1704912345\n", "\n", "  0 \n", "-86400"]
    assert list(process_lines(lines)) == ["1704912345", "0", "-86400"]


def test_offset_applies_to_every_line():
    """Test that the duration is applied to each epoch."""
    lines = ["0", "86400", "1706659200"]
    assert list(process_lines(lines, parse_duration("+1d"))) == [
        "86400",
        "172800",
        "1706745600",
    ]
    # 2024-01-31 +1M clamps to 2024-02-29
    assert list(process_lines(["1706659200"], parse_duration("+1M"))) == [
        "1709164800"
    ]


def test_abort_stops_at_first_bad_line():
    """Test that the abort policy yields earlier lines then raises."""
    results = []
    report = BatchReport()
    with pytest.raises(BatchAborted, match="line 3: Invalid epoch 'oops'") as excinfo:
        for line in process_lines(["1", "2", "oops", "4"], report=report):
            results.append(line)

    assert results == ["1", "2"]
    assert excinfo.value.line_number == 3
    assert isinstance(excinfo.value.cause, InvalidEpoch)
    assert report.total == 3


def test_skip_reports_and_continues(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the skip policy warns, records the line and keeps going."""
    report = BatchReport()
    with caplog.at_level(logging.WARNING, logger="epoch_time"):
        lines = ["1", "oops", "", "9223372036854775807", "3"]
        results = list(
            process_lines(
                lines, parse_duration("+1s"), on_error="skip", report=report
            )
        )

    assert results == ["2", "4"]
    assert report.total == 4
    assert report.processed == 2
    assert [number for number, _ in report.failures] == [2, 4]
    assert "line 2: Invalid epoch 'oops'" in caplog.text
    assert "line 4: Applying +1s" in caplog.text


def test_rejects_unknown_policy():
    """Test that policies other than abort and skip are refused."""
    with pytest.raises(ValueError, match="Invalid on_error policy"):
        list(process_lines(["1"], on_error="ignore"))  # type: ignore[arg-type]
