from bulmakit.columns import column, columns


def test_columns_class_and_children():
    el = columns("x", class_name="is-mobile")
    assert el.tag == "div"
    assert el.classes() == ["columns", "is-mobile"]
    assert el.children == ("x",)


def test_columns_default_class_keeps_space():
    assert columns().attrs["class"] == "columns "


def test_plain_column():
    assert column().attrs["class"] == "column "


def test_column_size_and_offset():
    el = column("c", is_="3", is_offset="2", class_name="extra")
    assert el.classes() == ["column", "is-3", "is-offset-2", "extra"]


def test_column_size_with_spaces():
    el = column(is_="narrow has-text-right")
    assert el.classes()[:3] == ["column", "is-narrow", "has-text-right"]