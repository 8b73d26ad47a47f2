from bulmakit.node import render
from bulmakit.table import table, tbody, tfoot, thead


def test_table_class_and_children():
    el = table("x", class_name="is-fullwidth")
    assert el.tag == "table"
    assert el.classes() == ["table", "is-fullwidth"]
    assert el.children == ("x",)


def test_tbody_one_row_per_item():
    rows = [(1, "Foobar"), (2, "Fulano"), (3, "Pepito")]
    el = tbody(rows, lambda row: [row[0], row[1]])
    assert el.tag == "tbody"
    assert [tr.tag for tr in el.children] == ["tr"] * len(rows)
    assert [tr.children for tr in el.children] == [(1, "Foobar"), (2, "Fulano"), (3, "Pepito")]


def test_tbody_empty_rows():
    el = tbody([], lambda row: row)
    assert el.children == ()


def test_thead_cells_are_th():
    cells = ["ID", "First name", "Last name"]
    el = thead(cells, lambda cell: cell)
    assert el.tag == "thead"
    (row,) = el.children
    assert row.tag == "tr"
    assert [th.tag for th in row.children] == ["th"] * len(cells)
    assert [th.children[0] for th in row.children] == cells


def test_tfoot_matches_thead_layout():
    cells = ["a", "b"]
    head = thead(cells, str.upper, class_name="c")
    foot = tfoot(cells, str.upper, class_name="c")
    assert foot.tag == "tfoot"
    assert foot.children == head.children
    assert foot.classes() == ["c"]


def test_cells_are_escaped_when_rendered():
    html_text = render(thead(["<b>"], lambda cell: cell))
    assert "&lt;b&gt;" in html_text
    assert "<b>" not in html_text