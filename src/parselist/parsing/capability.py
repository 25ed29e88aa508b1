# src/parselist/parsing/capability.py
from __future__ import annotations

import logging
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from typing import Any, Callable, Dict, Protocol, TypeVar, get_origin, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, PydanticUserError, TypeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]

# Types whose constructor is already their strict text parser.
TEXT_CONSTRUCTORS = frozenset({int, float, complex, str, Decimal, Fraction, UUID})


@runtime_checkable
class FromStr(Protocol):
    """Types that know how to build themselves from a line of text.

    ``from_str`` returns an instance or raises (usually ``ValueError``)
    when the text is not a valid representation.
    """

    @classmethod
    def from_str(cls, text: str) -> Any:
        ...


def _build_adapter(target: Any) -> TypeAdapter[Any] | None:
    """Build a string-validating adapter, or None if pydantic cannot."""
    try:
        return TypeAdapter(target)
    except (PydanticUserError, TypeError):
        return None


_type_adapter = lru_cache(maxsize=256)(_build_adapter)


def clear_adapter_cache() -> None:
    """Clear the cached type adapters."""
    _type_adapter.cache_clear()


def get_cache_info() -> Dict[str, int]:
    """Return basic statistics about the type adapter cache."""
    info = _type_adapter.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "size": info.currsize,
        "maxsize": info.maxsize,
    }


def resolve_parser(target: Any) -> Parser[Any]:
    """Return the function that turns one line of text into a ``target``.

    Resolution order:

    1. ``target.from_str`` when ``target`` satisfies :class:`FromStr`.
    2. ``target.model_validate_json`` for pydantic models, so each line
       is one JSON document.
    3. ``target`` itself for the builtin scalars in ``TEXT_CONSTRUCTORS``,
       so ``int`` rejects ``"1.0"`` exactly as ``int("1.0")`` does.
    4. ``TypeAdapter(target).validate_strings`` for other classes and
       typing constructs pydantic can build a schema for (``datetime``,
       ``date``, ``bool``, enums, ``Literal[...]``, ``Annotated[...]``).
    5. ``target`` itself when it is any other callable, including
       classes pydantic knows nothing about.
    """
    if isinstance(target, FromStr) and callable(getattr(target, "from_str", None)):
        logger.debug("Parsing lines with %r.from_str", target)
        return target.from_str

    if isinstance(target, type) and issubclass(target, BaseModel):
        logger.debug("Parsing lines as JSON documents for %s", target.__name__)
        return target.model_validate_json

    if isinstance(target, type) and target in TEXT_CONSTRUCTORS:
        logger.debug("Parsing lines with the %s constructor", target.__name__)
        return target

    # Plain functions are called as-is; pydantic would wrap them in a
    # call validator instead.
    if isinstance(target, type) or get_origin(target) is not None:
        try:
            adapter = _type_adapter(target)
        except TypeError:
            # unhashable
            adapter = _build_adapter(target)

        if adapter is not None:
            logger.debug("Parsing lines with a type adapter for %r", target)
            return adapter.validate_strings

    if callable(target):
        logger.debug("Parsing lines by calling %r", target)
        return target

    raise TypeError(f"{target!r} does not provide a way to parse text")
