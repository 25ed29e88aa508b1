# src/parselist/base/parser.py
from __future__ import annotations

import codecs
import logging
import os
from typing import Any, Generic, Iterable, Iterator, TypeVar, Union

from pydantic import BaseModel, field_validator

from parselist.exceptions import LineParseError, ParseListError, ReadError
from parselist.parsing.capability import Parser, resolve_parser
from parselist.parsing.lines import LineItem, LineSource, iter_source_lines
from parselist.parsing.result import Err, Ok, ParsedResult
from parselist.parsing.sequence import ResultSequence

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, os.PathLike]


class LineParser(BaseModel, Generic[T]):
    """Turns newline-separated text into a lazy sequence of parse results.

    ``target`` supplies the parse capability: a :class:`FromStr` type, a
    pydantic model (one JSON document per line), any type pydantic can
    validate from a string, or a plain callable. Every line is parsed on
    its own; a failing line becomes an :class:`Err` in the sequence and
    the lines after it are still attempted.
    """

    target: Any

    # Runtime configuration
    encoding: str = "utf-8"
    errors: str = "strict"
    skip_blank: bool = True
    strict_mode: bool = False
    parse_errors: tuple[type[BaseException], ...] = (ValueError, TypeError, ArithmeticError)

    model_config = {
        "arbitrary_types_allowed": True,
        "extra": "forbid",
        "validate_assignment": True,
        "validate_default": True,
    }

    @field_validator("target")
    @classmethod
    def _validate_target(cls, value: Any) -> Any:
        """Ensure the target can actually parse text."""
        try:
            resolve_parser(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @field_validator("errors")
    @classmethod
    def _validate_errors(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as exc:
            raise ValueError(f"unknown error handler: {value}") from exc
        return value

    @field_validator("parse_errors")
    @classmethod
    def _validate_parse_errors(
        cls, value: tuple[type[BaseException], ...]
    ) -> tuple[type[BaseException], ...]:
        if not value:
            raise ValueError("parse_errors must name at least one exception type")
        return value

    # ------------------------------------------------------------------
    # Per-line parsing
    # ------------------------------------------------------------------

    def _fail(self, failure: Err) -> Err:
        """Return the failure, or raise it when running in strict mode."""
        if self.strict_mode:
            raise failure.error
        return failure

    def _parse_line(self, parser: Parser[T], text: str, line_number: int) -> ParsedResult[T]:
        try:
            value = parser(text)
        except self.parse_errors as exc:
            logger.debug("Line %d failed to parse: %s", line_number, exc)
            error = LineParseError(exc, text, line_number)
            return self._fail(Err(error=error, line_number=line_number, raw_text=text))
        return Ok(value=value, line_number=line_number)

    def parse_text(self, text: str, line_number: int = 1) -> ParsedResult[T]:
        """Parse a single string into a result."""
        return self._parse_line(resolve_parser(self.target), text, line_number)

    def _results(self, items: Iterable[LineItem], parser: Parser[T]) -> Iterator[ParsedResult[T]]:
        for line_number, item in items:
            if isinstance(item, ParseListError):
                yield self._fail(Err(error=item, line_number=line_number))
                continue
            if self.skip_blank and not item.strip():
                continue
            yield self._parse_line(parser, item, line_number)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    def from_file_lines(self, path: PathLike) -> ResultSequence[T]:
        """Open ``path`` and parse it line by line.

        Failing to open the file raises the ``OSError`` immediately. The
        returned sequence owns the file handle and closes it when it is
        exhausted, closed, or discarded.
        """
        parser = resolve_parser(self.target)
        handle = open(path, "rb")
        logger.debug("Opened %s for line parsing", path)
        lines = iter_source_lines(handle, self.encoding, self.errors)
        return ResultSequence(self._results(lines, parser), resource=handle)

    def from_lines(self, source: LineSource) -> ResultSequence[T]:
        """Parse an already-open source line by line.

        ``source`` may be a binary or text stream, an in-memory ``bytes``
        or ``str`` buffer, or any iterable of ``bytes`` or ``str`` chunks,
        which are re-split on ``\\n``. It is borrowed, never closed. Read
        failures show up as ``Err`` items with kind ``"io"``.
        """
        parser = resolve_parser(self.target)
        lines = iter_source_lines(source, self.encoding, self.errors)
        return ResultSequence(self._results(lines, parser))

    def from_strings(self, strings: Iterable[str]) -> ResultSequence[T]:
        """Parse each string as one complete record, without splitting."""
        parser = resolve_parser(self.target)

        def _results() -> Iterator[ParsedResult[T]]:
            for line_number, text in enumerate(strings, start=1):
                yield self._parse_line(parser, text, line_number)

        return ResultSequence(_results())

    def from_iter(self, items: Iterable[Union[str, OSError]]) -> ResultSequence[T]:
        """Parse strings interleaved with read failures from some other reader.

        ``OSError`` instances become ``"io"`` failures at their position
        and parsing continues with the next item.
        """
        parser = resolve_parser(self.target)

        def _results() -> Iterator[ParsedResult[T]]:
            for line_number, item in enumerate(items, start=1):
                if isinstance(item, OSError):
                    error = ReadError(item, line_number)
                    yield self._fail(Err(error=error, line_number=line_number))
                    continue
                yield self._parse_line(parser, item, line_number)

        return ResultSequence(_results())
