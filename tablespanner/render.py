"""Public entry points wrapping the layout engine."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .codec import decode_spaninfo, decode_tablespec, encode_layout
from .engine import TableLayout, layout_table
from .models import SpanInfo, SpanTable, build_span_table


def render_table(spaninfo: SpanInfo | SpanTable, tablespec: Sequence[Sequence]) -> TableLayout:
    """Calculate the layout of ``tablespec`` given per-cell spans.

    ``spaninfo`` may be a mapping of identifier to ``(rows, cols)`` or any
    iterable of ``(identifier, (rows, cols))`` pairs. Cells covered by another
    cell's span come back as ``None``.
    """
    return layout_table(build_span_table(spaninfo), tablespec)


def render_json_table(
    spaninfo: str,
    tablespec: str,
    *,
    indent: Optional[int] = None,
    ensure_ascii: bool = False,
) -> str:
    """Render JSON span info and a JSON table spec to a JSON layout."""
    span_table = decode_spaninfo(spaninfo)
    rows = decode_tablespec(tablespec)
    return encode_layout(layout_table(span_table, rows), indent=indent, ensure_ascii=ensure_ascii)
