"""Span models: per-cell span dimensions and the span lookup table."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .logging import get_logger

logger = get_logger(__name__)


class TablespannerError(ValueError):
    """Base class for errors surfaced to library and CLI callers."""


class SpanError(TablespannerError):
    """Raised when a span is constructed with a non-positive dimension."""


@dataclass(frozen=True, slots=True)
class Span:
    """Number of rows and columns occupied by a single table cell."""

    rows: int = 1
    cols: int = 1

    def __post_init__(self) -> None:
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise SpanError(f"Span.{name} must be an integer, got {value!r}")
            if value == 0:
                raise SpanError(f"Error constructing Span. Zero value provided for Span.{name}.")
            if value < 0:
                raise SpanError(f"Error constructing Span. Negative value provided for Span.{name}.")


DEFAULT_SPAN = Span(1, 1)

SpanLike = Union[Span, Tuple[int, int]]
SpanInfo = Union[Mapping[Hashable, SpanLike], Iterable[Tuple[Hashable, SpanLike]]]


def to_span(value: SpanLike) -> Span:
    if isinstance(value, Span):
        return value
    try:
        rows, cols = value
    except (TypeError, ValueError) as exc:
        raise SpanError(f"Span must be a (rows, cols) pair, got {value!r}") from exc
    return Span(rows, cols)


class SpanTable(Mapping):
    """Read-only mapping from cell identifier to its :class:`Span`.

    Identifiers missing from the table are treated as ordinary cells; use
    :meth:`lookup` rather than indexing when that fallback is wanted.
    """

    __slots__ = ("_spans",)

    def __init__(self, spans: Mapping[Hashable, SpanLike] | None = None) -> None:
        self._spans: Dict[Hashable, Span] = {
            identifier: to_span(value) for identifier, value in (spans or {}).items()
        }

    @classmethod
    def from_pairs(cls, data: SpanInfo) -> "SpanTable":
        """Build a table from a mapping or an iterable of ``(identifier, span)`` pairs.

        Later duplicates overwrite earlier ones.
        """
        items = data.items() if isinstance(data, Mapping) else data
        spans: Dict[Hashable, Span] = {}
        for identifier, value in items:
            spans[identifier] = to_span(value)
        logger.debug("span_table_built", spans=len(spans))
        return cls(spans)

    def lookup(self, identifier: Hashable) -> Span:
        return self._spans.get(identifier, DEFAULT_SPAN)

    def __getitem__(self, identifier: Hashable) -> Span:
        return self._spans[identifier]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __repr__(self) -> str:
        return f"SpanTable({self._spans!r})"


def build_span_table(data: SpanInfo | SpanTable) -> SpanTable:
    if isinstance(data, SpanTable):
        return data
    return SpanTable.from_pairs(data)
