# src/parselist/parsing/sequence.py
from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, TypeVar

from parselist.exceptions import CollectError
from parselist.parsing.result import Err, Ok, ParsedResult, ParseSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResultSequence(Generic[T]):
    """Lazy, single-pass sequence of per-line parse results.

    Each call to ``next`` reads and parses exactly one more element. When
    the sequence owns a resource (the file opened by ``from_file_lines``)
    it is released as soon as the sequence is exhausted, closed, used as
    a context manager and exited, or garbage collected.
    """

    def __init__(self, results: Iterator[ParsedResult[T]], resource: Any = None) -> None:
        self._results = results
        self._resource = resource
        self._closed = False

    def __iter__(self) -> ResultSequence[T]:
        return self

    def __next__(self) -> ParsedResult[T]:
        if self._closed:
            raise StopIteration
        try:
            return next(self._results)
        except BaseException:
            # Exhaustion and strict-mode failures both end the sequence.
            self.close()
            raise

    def __enter__(self) -> ResultSequence[T]:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop iteration and release any resource owned by the sequence."""
        if self._closed:
            return
        self._closed = True
        close_results = getattr(self._results, "close", None)
        try:
            if callable(close_results):
                close_results()
        finally:
            resource, self._resource = self._resource, None
            if resource is not None:
                resource.close()
                logger.debug("Released %r", getattr(resource, "name", resource))

    # ------------------------------------------------------------------
    # Caller-side collection helpers
    # ------------------------------------------------------------------

    def ok_values(self) -> Iterator[T]:
        """Lazily yield parsed values, dropping failed lines."""
        for result in self:
            if isinstance(result, Ok):
                yield result.value

    def partition(self) -> ParseSummary[T]:
        """Consume the sequence into successes and failures."""
        summary: ParseSummary[T] = ParseSummary()
        for result in self:
            summary.add(result)
        return summary

    def collect(self) -> list[T]:
        """Consume the sequence and return every value in order.

        Raises CollectError carrying all failures if any line failed.
        """
        values: list[T] = []
        failures: list[Err] = []
        for result in self:
            if isinstance(result, Ok):
                values.append(result.value)
            else:
                failures.append(result)
        if failures:
            raise CollectError(failures)
        return values
