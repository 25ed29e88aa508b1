# src/parselist/base/__init__.py
from __future__ import annotations

from .parser import LineParser
from .record import LineRecord, clear_pattern_cache

__all__ = [
    "LineParser",
    "LineRecord",
    "clear_pattern_cache",
]
