# src/parselist/parsing/result.py
from __future__ import annotations

from typing import Callable, Generic, Literal, NoReturn, TypeVar, Union

from pydantic import BaseModel, Field

from parselist.exceptions import CollectError, ParseListError

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    """A line that parsed successfully."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: T = Field(description="Parsed value")
    line_number: int = Field(description="1-based position in the source")

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


class Err(BaseModel):
    """A line that could not be read or parsed."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    error: ParseListError = Field(description="Read or parse failure for this position")
    line_number: int = Field(description="1-based position in the source")
    raw_text: str | None = Field(
        default=None,
        description="Text that failed to parse; None for read failures",
    )

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def kind(self) -> Literal["io", "parse"]:
        return self.error.kind  # type: ignore[return-value]

    def unwrap(self) -> NoReturn:
        raise self.error


ParsedResult = Union[Ok[T], Err]


class ParseSummary(BaseModel, Generic[T]):
    """Container for a fully consumed result sequence.

    Holds parsed values in source order and the failures that were
    observed along the way.
    """

    model_config = {"arbitrary_types_allowed": True}

    successes: list[T] = Field(
        default_factory=list,
        description="Successfully parsed values",
    )
    failures: list[Err] = Field(
        default_factory=list,
        description="Failed lines",
    )

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0

    @property
    def success_count(self) -> int:
        return len(self.successes)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    def add(self, result: ParsedResult[T]) -> None:
        if isinstance(result, Ok):
            self.successes.append(result.value)
        else:
            self.failures.append(result)

    def raise_if_failures(self) -> None:
        """Raise CollectError if any failures occurred."""
        if self.has_failures:
            raise CollectError(self.failures)

    def filter_successes(self, predicate: Callable[[T], bool]) -> list[T]:
        return [s for s in self.successes if predicate(s)]

    def get_failure_lines(self) -> list[int]:
        """Get line numbers of all failures."""
        return [f.line_number for f in self.failures]

    def get_failure_summary(self) -> str:
        """Get human-readable failure summary."""
        if not self.failures:
            return "No parsing failures"

        total = self.success_count + self.failure_count
        lines: list[str] = [
            f"Parsing Failures: {self.failure_count} / {total} lines",
            "",
        ]

        for failure in self.failures[:5]:
            text = failure.raw_text if failure.raw_text is not None else "<unreadable>"
            lines.append(f"Line {failure.line_number} [{failure.kind}]: {text[:60]}")
            lines.append(f"  Error: {str(failure.error)[:100]}")

        if len(self.failures) > 5:
            lines.append(f"... and {len(self.failures) - 5} more failures")

        return "\n".join(lines)
