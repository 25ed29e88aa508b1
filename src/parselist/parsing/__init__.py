# src/parselist/parsing/__init__.py
from __future__ import annotations

from .capability import FromStr, resolve_parser
from .lines import iter_source_lines, strip_line_ending
from .result import Err, Ok, ParsedResult, ParseSummary
from .sequence import ResultSequence

__all__ = [
    "FromStr",
    "resolve_parser",
    "iter_source_lines",
    "strip_line_ending",
    "Err",
    "Ok",
    "ParsedResult",
    "ParseSummary",
    "ResultSequence",
]
