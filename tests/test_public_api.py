# tests/test_public_api.py
from __future__ import annotations

import parselist


def test_public_api_exports() -> None:
    public = set(parselist.__all__)
    for name in [
        "from_file_lines",
        "from_lines",
        "from_strings",
        "from_iter",
        "LineParser",
        "LineRecord",
        "FromStr",
        "Ok",
        "Err",
        "ParseSummary",
        "ResultSequence",
        "ParseListException",
        "ParseListError",
        "ReadError",
        "LineParseError",
        "CollectError",
        "RecordMismatchError",
    ]:
        assert name in public
        assert hasattr(parselist, name)
