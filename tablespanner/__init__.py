"""Table layout calculation for cells spanning multiple rows and columns."""

__version__ = "1.0.0"

from .codec import TableDecodeError
from .engine import layout_table
from .models import DEFAULT_SPAN, Span, SpanError, SpanTable, TablespannerError
from .render import render_json_table, render_table

__all__ = [
    "DEFAULT_SPAN",
    "Span",
    "SpanError",
    "SpanTable",
    "TableDecodeError",
    "TablespannerError",
    "layout_table",
    "render_json_table",
    "render_table",
]
