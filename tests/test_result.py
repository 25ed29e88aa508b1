# tests/test_result.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from parselist.exceptions import CollectError, LineParseError, ReadError
from parselist.parsing import Err, Ok, ParseSummary


def _parse_failure(text: str, line_number: int) -> Err:
    return Err(
        error=LineParseError(ValueError(f"bad value {text!r}"), text, line_number),
        line_number=line_number,
        raw_text=text,
    )


def test_ok_unwraps_to_value() -> None:
    result = Ok(value=3, line_number=1)
    assert result.is_ok is True
    assert result.unwrap() == 3


def test_ok_is_frozen_and_comparable() -> None:
    result = Ok(value=3, line_number=1)
    assert result == Ok(value=3, line_number=1)
    with pytest.raises(ValidationError):
        result.value = 4  # type: ignore[misc]


def test_parametrized_ok_validates_value() -> None:
    assert Ok[int](value="5", line_number=1).value == 5


def test_err_unwrap_raises_its_error() -> None:
    failure = _parse_failure("boop", 2)
    assert failure.is_ok is False
    assert failure.kind == "parse"
    with pytest.raises(LineParseError):
        failure.unwrap()


def test_err_for_read_failure_has_no_text() -> None:
    failure = Err(error=ReadError(OSError("gone"), 1), line_number=1)
    assert failure.kind == "io"
    assert failure.raw_text is None


def test_err_rejects_non_parselist_errors() -> None:
    with pytest.raises(ValidationError):
        Err(error=ValueError("plain"), line_number=1)  # type: ignore[arg-type]


def test_empty_summary_has_zero_counts_and_no_failures() -> None:
    summary: ParseSummary[int] = ParseSummary()
    assert summary.success_count == 0
    assert summary.failure_count == 0
    assert summary.has_failures is False
    assert summary.get_failure_summary() == "No parsing failures"


def test_summary_add_routes_results() -> None:
    summary: ParseSummary[int] = ParseSummary()
    summary.add(Ok(value=0, line_number=1))
    summary.add(_parse_failure("x", 2))
    summary.add(Ok(value=2, line_number=3))

    assert summary.successes == [0, 2]
    assert summary.failure_count == 1
    assert summary.get_failure_lines() == [2]


def test_raise_if_failures_with_failures() -> None:
    summary: ParseSummary[int] = ParseSummary(failures=[_parse_failure("x", 1)])
    with pytest.raises(CollectError) as exc_info:
        summary.raise_if_failures()
    assert exc_info.value.failures == summary.failures


def test_raise_if_failures_no_failures() -> None:
    ParseSummary(successes=[1, 2]).raise_if_failures()


def test_filter_successes() -> None:
    summary = ParseSummary(successes=[1, 2, 3, 4])
    assert summary.filter_successes(lambda v: v % 2 == 0) == [2, 4]


def test_failure_summary_mentions_counts_lines_and_kinds() -> None:
    summary = ParseSummary(
        successes=[0, 1, 3],
        failures=[
            _parse_failure("x", 3),
            Err(error=ReadError(OSError("device error"), 5), line_number=5),
        ],
    )

    text = summary.get_failure_summary()
    assert "2 / 5 lines" in text
    assert "Line 3 [parse]: x" in text
    assert "Line 5 [io]: <unreadable>" in text
    assert "device error" in text


def test_failure_summary_truncates_after_five() -> None:
    summary = ParseSummary(failures=[_parse_failure(str(n), n) for n in range(1, 8)])
    assert "... and 2 more failures" in summary.get_failure_summary()
