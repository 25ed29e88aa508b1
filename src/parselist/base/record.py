# src/parselist/base/record.py
from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from parselist.exceptions import RecordMismatchError

TRecord = TypeVar("TRecord", bound="LineRecord")


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile and cache record patterns."""
    return re.compile(pattern)


def clear_pattern_cache() -> None:
    """Clear the compiled record pattern cache."""
    _compile_pattern.cache_clear()


class LineRecord(BaseModel):
    """Base model for records that occupy exactly one line.

    Subclasses set ``pattern`` to a regex whose named groups correspond
    to model fields. The whole line must match; the captured groups are
    then validated by pydantic as usual, so fields may be ``int``,
    ``datetime`` and so on. Groups that did not participate in the match
    are left out, letting the field default apply.

    Because records implement ``from_str`` they can be handed straight
    to :class:`~parselist.base.parser.LineParser` as the target.
    """

    pattern: ClassVar[str]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        pattern = getattr(cls, "pattern", None)
        if pattern is None:
            return

        compiled = _compile_pattern(pattern)
        unknown = set(compiled.groupindex) - set(cls.model_fields)
        if unknown:
            names = ", ".join(sorted(unknown))
            raise TypeError(f"{cls.__name__}.pattern names unknown fields: {names}")

    @classmethod
    def from_str(cls: type[TRecord], text: str) -> TRecord:
        """Build a record from one line of text.

        Raises RecordMismatchError when the line does not match and
        pydantic's ValidationError when a captured value is invalid.
        """
        pattern = getattr(cls, "pattern", None)
        if pattern is None:
            raise NotImplementedError(f"{cls.__name__} must define 'pattern' class variable")

        match = _compile_pattern(pattern).fullmatch(text)
        if match is None:
            raise RecordMismatchError(cls.__name__, pattern, text)

        values = {name: value for name, value in match.groupdict().items() if value is not None}
        return cls.model_validate(values)
