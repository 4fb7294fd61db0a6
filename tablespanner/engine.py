"""Table layout engine.

Works on well-typed input only: a :class:`~tablespanner.models.SpanTable` and
a row-major list of anchor identifiers. Decoding, encoding and the CLI are
thin wrappers around :func:`layout_table`.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Dict, List, Optional, TypeVar

from .logging import get_logger
from .models import SpanTable

logger = get_logger(__name__)

T = TypeVar("T", bound=Hashable)

TableSpec = Sequence[Sequence[T]]
TableLayout = List[List[Optional[T]]]


class RowSpanTracker:
    """Tracks which columns are held by rowspans anchored in earlier rows.

    The tracker knows nothing about colspans: every column of a multi-column
    span is tracked separately by the caller. Counts are relative to the row
    currently being built, so :meth:`advance` must be called once per row.
    """

    def __init__(self) -> None:
        self._active: Dict[int, int] = {}

    def track(self, col: int, row_count: int) -> None:
        """Reserve ``col`` for ``row_count`` rows, the current one included."""
        if row_count > 1:
            self._active[col] = row_count

    def advance(self) -> None:
        for col in list(self._active):
            remaining = self._active[col]
            if remaining > 1:
                self._active[col] = remaining - 1
            else:
                del self._active[col]

    def blocked(self, col: int) -> bool:
        return self._active.get(col, 0) > 0

    def fits(self, col: int, col_count: int) -> bool:
        """Return True if ``col_count`` columns starting at ``col`` are all free."""
        return not any(self.blocked(peek) for peek in range(col, col + col_count))

    def max_blocked(self) -> Optional[int]:
        if not self._active:
            return None
        return max(self._active)

    def __len__(self) -> int:
        return len(self._active)


def layout_table(span_table: SpanTable, data: TableSpec) -> TableLayout:
    """Lay out ``data`` with the spans from ``span_table``.

    Returns one list per output row where anchors hold their identifier and
    positions covered by a span hold ``None``. Rows are appended after the
    input is exhausted for rowspans that reach past the last input row.
    """
    table: TableLayout = []
    active_row_spans = RowSpanTracker()

    for in_row in data:
        row: List[Optional[T]] = []
        for cell in in_row:
            span = span_table.lookup(cell)

            while not active_row_spans.fits(len(row), span.cols):
                row.append(None)

            active_row_spans.track(len(row), span.rows)
            row.append(cell)
            for _ in range(1, span.cols):
                active_row_spans.track(len(row), span.rows)
                row.append(None)
        table.append(row)
        active_row_spans.advance()

    input_rows = len(table)

    # Rowspans still open after the last input row.
    col = active_row_spans.max_blocked()
    while col is not None:
        table.append([None] * (col + 1))
        active_row_spans.advance()
        col = active_row_spans.max_blocked()

    logger.debug(
        "layout_completed",
        input_rows=input_rows,
        trailing_rows=len(table) - input_rows,
        spans=len(span_table),
    )
    return table
