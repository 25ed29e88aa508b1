# src/parselist/loaders.py
from __future__ import annotations

from typing import Any, Iterable, Union

from parselist.base.parser import LineParser, PathLike
from parselist.parsing.lines import LineSource
from parselist.parsing.sequence import ResultSequence


def from_file_lines(target: Any, path: PathLike, **options: Any) -> ResultSequence[Any]:
    """Parse every line of the file at ``path`` into ``target``.

    Raises the ``OSError`` from opening the file before producing any
    result. ``options`` are :class:`LineParser` settings such as
    ``encoding`` or ``strict_mode``.
    """
    return LineParser(target=target, **options).from_file_lines(path)


def from_lines(target: Any, source: LineSource, **options: Any) -> ResultSequence[Any]:
    """Parse every line of an already-open stream or line iterable."""
    return LineParser(target=target, **options).from_lines(source)


def from_strings(target: Any, strings: Iterable[str], **options: Any) -> ResultSequence[Any]:
    """Parse each string independently, without any line splitting."""
    return LineParser(target=target, **options).from_strings(strings)


def from_iter(
    target: Any,
    items: Iterable[Union[str, OSError]],
    **options: Any,
) -> ResultSequence[Any]:
    """Parse strings, passing ``OSError`` items through as read failures."""
    return LineParser(target=target, **options).from_iter(items)
