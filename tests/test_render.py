import pytest

from tablespanner import SpanError, TableDecodeError, render_json_table, render_table


def test_render_json_table_end_to_end():
    spaninfo = '{"B": [2, 2], "H": [1, 2]}'
    tablespec = '[["A", "B", "C"], ["D", "E"], ["F", "G", "H"]]'

    assert (
        render_json_table(spaninfo, tablespec)
        == '[["A","B",null,"C"],["D",null,null,"E"],["F","G","H",null]]'
    )


def test_render_json_table_trailing_rows():
    result = render_json_table('{"B": [3, 1], "C": [2, 1]}', '[["A", "B", "C"]]')

    assert result == '[["A","B","C"],[null,null,null],[null,null]]'


def test_render_json_table_surfaces_errors():
    with pytest.raises(SpanError):
        render_json_table('{"A": [0, 1]}', '[["A"]]')
    with pytest.raises(TableDecodeError):
        render_json_table("{}", '[["A", null]]')


def test_render_table_accepts_mapping_of_tuples():
    layout = render_table({"a": (2, 2)}, [["a", "b"], ["c", "d"]])

    assert layout == [["a", None, "b"], [None, None, "c", "d"]]


def test_render_table_accepts_pair_list():
    layout = render_table([("D", (1, 2))], [["A", "B", "C"], ["D", "E"], ["G", "H", "I"]])

    assert layout[1] == ["D", None, "E"]


def test_render_table_without_spans_is_identity():
    data = [["A", "B", "C"], ["D", "E", "F"]]

    assert render_table({}, data) == data


def test_render_table_rejects_zero_span():
    with pytest.raises(SpanError):
        render_table({"A": (1, 0)}, [["A"]])
