"""JSON decoding of span info and table specs, and encoding of layouts."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from .engine import TableLayout
from .logging import get_logger
from .models import SpanTable, TablespannerError

logger = get_logger(__name__)

__all__ = ["TableDecodeError", "decode_spaninfo", "decode_tablespec", "encode_layout"]


class TableDecodeError(TablespannerError):
    """Raised when serialized input does not have the expected shape."""


def _load(raw: str, kind: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("decode_failed", kind=kind, error=str(exc))
        raise TableDecodeError(f"Invalid {kind} JSON: {exc}") from exc


def _dimension(identifier: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TableDecodeError(
            f"Span dimensions for {identifier!r} must be non-negative integers, got {value!r}"
        )
    return value


def decode_spaninfo(raw: str) -> SpanTable:
    """Parse ``{"A": [rows, cols], ...}`` into a :class:`SpanTable`.

    Shape problems raise :class:`TableDecodeError`; a zero dimension is a
    well-formed document and raises :class:`~tablespanner.models.SpanError`.
    """
    data = _load(raw, "span info")
    if not isinstance(data, dict):
        raise TableDecodeError("Span info must be a JSON object mapping cell identifiers to [rows, cols]")

    pairs: Dict[str, Tuple[int, int]] = {}
    for identifier, value in data.items():
        if not isinstance(value, list) or len(value) != 2:
            raise TableDecodeError(
                f"Span for {identifier!r} must be a two-element array [rows, cols], got {value!r}"
            )
        pairs[identifier] = (_dimension(identifier, value[0]), _dimension(identifier, value[1]))

    return SpanTable.from_pairs(pairs)


def decode_tablespec(raw: str) -> List[List[str]]:
    data = _load(raw, "table spec")
    if not isinstance(data, list):
        raise TableDecodeError("Table spec must be a two-dimensional JSON array of strings")

    rows: List[List[str]] = []
    for row_index, row in enumerate(data):
        if not isinstance(row, list):
            raise TableDecodeError(f"Table spec row {row_index} must be an array, got {row!r}")
        for col_index, cell in enumerate(row):
            if not isinstance(cell, str):
                raise TableDecodeError(
                    f"Table spec cell [{row_index}][{col_index}] must be a string, got {cell!r}"
                )
        rows.append(list(row))
    return rows


def encode_layout(layout: TableLayout, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    """Serialize a layout; spanned positions become ``null``."""
    if indent is None:
        return json.dumps(layout, separators=(",", ":"), ensure_ascii=ensure_ascii)
    return json.dumps(layout, indent=indent, ensure_ascii=ensure_ascii)
