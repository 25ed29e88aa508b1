# src/parselist/exceptions.py
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from parselist.parsing.result import Err


class ParseListException(Exception):
    """Base exception for all parselist-specific errors."""


class ParseListError(ParseListException):
    """Failure for a single element of a result sequence.

    Instances are carried inside :class:`~parselist.parsing.result.Err`
    rather than raised, unless the parser runs in strict mode. The
    string form is the string form of the underlying cause.
    """

    kind: str = "unknown"

    def __init__(self, cause: BaseException, line_number: int | None = None) -> None:
        self.cause = cause
        self.line_number = line_number
        super().__init__(str(cause))

    def __str__(self) -> str:
        return str(self.cause)


class ReadError(ParseListError):
    """Reading or decoding the next line from the source failed."""

    kind = "io"


class LineParseError(ParseListError):
    """The target type rejected the text of a line."""

    kind = "parse"

    def __init__(
        self,
        cause: BaseException,
        raw_text: str,
        line_number: int | None = None,
    ) -> None:
        self.raw_text = raw_text
        super().__init__(cause, line_number)


class CollectError(ParseListException):
    """Raised when results are collected and at least one line failed."""

    def __init__(self, failures: Sequence[Err]) -> None:
        """Initialize with a sequence of failures and build a message.

        The first failure is used to build a short preview in the
        error message, truncated to 200 characters.
        """
        self.failures = failures
        count = len(failures)

        prefix = f"Failed to parse {count} line(s)"
        if failures:
            first = failures[0]
            text = first.raw_text if first.raw_text is not None else str(first.error)
            if len(text) > 200:
                text = text[:200] + "..."
            suffix = f" (line {first.line_number}: {text}) First failure: {first.error}"
        else:
            suffix = ""

        super().__init__(prefix + suffix)


class RecordMismatchError(ValueError, ParseListException):
    """Raised when a line does not match a record's pattern."""

    def __init__(self, record: str, pattern: str, text: str) -> None:
        self.record = record
        self.pattern = pattern
        self.text = text
        preview = text if len(text) <= 60 else text[:60] + "..."
        super().__init__(f"{record}: {preview!r} does not match pattern {pattern!r}")
