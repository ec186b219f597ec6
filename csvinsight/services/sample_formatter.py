"""Bounded text previews of a ``Table`` for embedding in prompts."""

from __future__ import annotations

from csvinsight.services.csv_parser import Table

FULL_PREVIEW_MAX_ROWS = 100
TRUNCATION_MARKER = f"... (showing first {FULL_PREVIEW_MAX_ROWS} rows only)\n"


def _format_line(values: tuple[str, ...]) -> str:
    return ", ".join(values) + "\n"


def sample(table: Table, max_rows: int) -> str:
    """Render the header plus at most *max_rows* rows, one per line."""
    limit = max(0, max_rows)
    lines = [_format_line(table.headers)]
    lines.extend(_format_line(row) for row in table.rows[:limit])
    return "".join(lines)


def full(table: Table) -> str:
    """Render every row, capped at ``FULL_PREVIEW_MAX_ROWS`` with a marker."""
    if table.row_count > FULL_PREVIEW_MAX_ROWS:
        return sample(table, FULL_PREVIEW_MAX_ROWS) + TRUNCATION_MARKER
    return sample(table, table.row_count)
