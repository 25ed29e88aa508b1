# src/parselist/parsing/lines.py
from __future__ import annotations

import io
import logging
from typing import IO, Any, Iterable, Iterator, Tuple, Union

from parselist.exceptions import ReadError

logger = logging.getLogger(__name__)

LineSource = Union[bytes, str, IO[bytes], IO[str], Iterable[bytes], Iterable[str]]
LineItem = Tuple[int, Union[str, ReadError]]


def strip_line_ending(text: str) -> str:
    """Remove one trailing ``\\n`` and a ``\\r`` directly before it."""
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def _split_chunks(chunks: Iterable[Any]) -> Iterator[Any]:
    """Re-split arbitrary ``bytes`` or ``str`` chunks on ``\\n``.

    Only the current unfinished line is held between chunks. A pending
    fragment is ended early when the chunk type switches between
    ``bytes`` and ``str``.
    """
    pending: Any = None
    for chunk in chunks:
        if isinstance(chunk, (bytes, bytearray, memoryview)):
            chunk, newline = bytes(chunk), b"\n"
        elif isinstance(chunk, str):
            newline = "\n"
        else:
            raise TypeError(
                f"line sources must produce str or bytes, got {type(chunk).__name__}"
            )

        if pending is not None and type(pending) is not type(chunk):
            if pending:
                yield pending
            pending = None
        pending = chunk if pending is None else pending + chunk

        start = 0
        end = pending.find(newline)
        while end != -1:
            yield pending[start:end + 1]
            start = end + 1
            end = pending.find(newline, start)
        pending = pending[start:]

    if pending:
        yield pending


def _raw_chunks(source: Any) -> Iterator[Any]:
    """Yield raw lines from ``source`` without buffering the whole input.

    In-memory ``bytes`` and ``str`` buffers are read as streams. Objects
    with ``readline`` are read one line per call; anything else is an
    iterable of chunks that are re-split into lines.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    elif isinstance(source, str):
        source = io.StringIO(source, newline="\n")

    readline = getattr(source, "readline", None)
    if callable(readline):
        while True:
            chunk = readline()
            if not chunk:
                return
            yield chunk
    else:
        yield from _split_chunks(source)


def iter_source_lines(
    source: LineSource,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> Iterator[LineItem]:
    """Split ``source`` into ``(line_number, text)`` pairs.

    Lines are delimited by ``\\n``; a final fragment without a delimiter
    is still produced, an empty trailing fragment is not. Byte lines are
    decoded one at a time, so a line that fails to decode is reported
    as a ``ReadError`` for that position and reading continues. Any
    failure raised while reading from the source itself is reported
    once and ends the iteration.
    """
    chunks = _raw_chunks(source)
    line_number = 0
    while True:
        try:
            chunk = next(chunks)
        except StopIteration:
            return
        except (OSError, ValueError) as exc:
            # ValueError covers decode errors from text streams and reads
            # from a stream that was closed underneath us.
            line_number += 1
            logger.debug("Read failed at line %d: %s", line_number, exc)
            yield line_number, ReadError(exc, line_number)
            return

        line_number += 1
        if isinstance(chunk, (bytes, bytearray)):
            try:
                text = chunk.decode(encoding, errors)
            except UnicodeDecodeError as exc:
                logger.debug("Line %d could not be decoded as %s: %s", line_number, encoding, exc)
                yield line_number, ReadError(exc, line_number)
                continue
        elif isinstance(chunk, str):
            text = chunk
        else:
            raise TypeError(
                f"line sources must produce str or bytes, got {type(chunk).__name__}"
            )

        yield line_number, strip_line_ending(text)
