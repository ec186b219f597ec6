"""CSV parsing: raw upload text -> immutable ``Table``.

Splitting is deliberately naive: lines are split on ``\\n`` / ``\\r\\n`` and
fields on ``,`` with no quote or escape handling.  Quoted fields containing
commas are split like any other field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from csvinsight.exceptions import MalformedInputError

_LINE_SPLIT = re.compile(r"\r?\n")


@dataclass(frozen=True)
class Table:
    """Parsed CSV: header fields plus data rows.

    ``row_count`` and ``column_count`` are derived from ``rows`` and
    ``headers`` at construction and cannot be set independently.
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    row_count: int = field(init=False)
    column_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", tuple(self.headers))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))
        object.__setattr__(self, "row_count", len(self.rows))
        object.__setattr__(self, "column_count", len(self.headers))


def _split_line(line: str) -> tuple[str, ...]:
    return tuple(value.strip() for value in line.split(","))


def decode(raw: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a leading BOM if present."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedInputError("CSV file must be UTF-8 encoded") from exc


def parse(raw_text: str) -> Table:
    """Parse *raw_text* into a ``Table``.

    Raises ``MalformedInputError`` when the trimmed text has fewer than two
    lines (no header, or a header with no data rows).  Blank lines between
    rows are skipped.  Rows are not reconciled against the header width.
    """
    lines = _LINE_SPLIT.split(raw_text.strip())
    if len(lines) < 2:
        raise MalformedInputError("CSV must contain a header row and at least one data row")

    headers = _split_line(lines[0].strip())
    rows = [_split_line(line.strip()) for line in lines[1:] if line.strip()]
    return Table(headers=headers, rows=rows)
