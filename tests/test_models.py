import pytest

from tablespanner.models import DEFAULT_SPAN, Span, SpanError, SpanTable, build_span_table


@pytest.mark.parametrize("rows, cols", [(0, 1), (0, 5), (0, 0), (1, 0), (7, 0)])
def test_span_rejects_zero_dimensions(rows, cols):
    with pytest.raises(SpanError, match="Zero value"):
        Span(rows, cols)


@pytest.mark.parametrize("rows, cols", [(-1, 1), (2, -3)])
def test_span_rejects_negative_dimensions(rows, cols):
    with pytest.raises(SpanError):
        Span(rows, cols)


@pytest.mark.parametrize("rows, cols", [(1.5, 1), (True, 1), ("2", 2)])
def test_span_rejects_non_integers(rows, cols):
    with pytest.raises(SpanError):
        Span(rows, cols)


def test_span_error_is_value_error():
    with pytest.raises(ValueError):
        Span(0, 1)


def test_default_span_is_single_cell():
    assert DEFAULT_SPAN == Span(1, 1) == Span()


def test_lookup_falls_back_to_default_span():
    table = SpanTable({"A": (2, 3)})

    assert table.lookup("A") == Span(2, 3)
    assert table.lookup("missing") == DEFAULT_SPAN


def test_from_pairs_accepts_mapping_and_iterables():
    from_mapping = SpanTable.from_pairs({"A": (1, 2), "B": Span(3, 1)})
    from_list = SpanTable.from_pairs([("A", (1, 2)), ("B", (3, 1))])

    assert from_mapping == from_list
    assert dict(from_list) == {"A": Span(1, 2), "B": Span(3, 1)}


def test_from_pairs_is_order_independent():
    pairs = [("A", (1, 2)), ("B", (3, 1)), ("C", (2, 2))]

    assert SpanTable.from_pairs(pairs) == SpanTable.from_pairs(list(reversed(pairs)))


def test_from_pairs_last_duplicate_wins():
    table = SpanTable.from_pairs([("A", (1, 2)), ("A", (4, 1))])

    assert table.lookup("A") == Span(4, 1)
    assert len(table) == 1


def test_from_pairs_validates_every_pair():
    with pytest.raises(SpanError):
        SpanTable.from_pairs([("A", (0, 2)), ("A", (1, 1))])


def test_from_pairs_rejects_malformed_span():
    with pytest.raises(SpanError, match="pair"):
        SpanTable.from_pairs({"A": (1, 2, 3)})


def test_build_span_table_passes_existing_table_through():
    table = SpanTable({"A": (2, 2)})

    assert build_span_table(table) is table
    assert build_span_table({"A": (2, 2)}) == table


def test_span_table_is_read_only():
    table = SpanTable({"A": (2, 2)})

    with pytest.raises(TypeError):
        table["B"] = Span(1, 1)
