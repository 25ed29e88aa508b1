# src/parselist/__init__.py
from __future__ import annotations

"""parselist public API.

Parse files, streams and lists of strings into lazy sequences of
per-line results: line splitting, the parse capability resolution,
the result types, and the exception hierarchy.
"""

from .base import LineParser, LineRecord
from .exceptions import (
    CollectError,
    LineParseError,
    ParseListError,
    ParseListException,
    ReadError,
    RecordMismatchError,
)
from .loaders import from_file_lines, from_iter, from_lines, from_strings
from .parsing import Err, FromStr, Ok, ParsedResult, ParseSummary, ResultSequence

__all__ = [
    "from_file_lines",
    "from_lines",
    "from_strings",
    "from_iter",
    "LineParser",
    "LineRecord",
    "FromStr",
    "Ok",
    "Err",
    "ParsedResult",
    "ParseSummary",
    "ResultSequence",
    "ParseListException",
    "ParseListError",
    "ReadError",
    "LineParseError",
    "CollectError",
    "RecordMismatchError",
]

__version__ = "0.1.0"
