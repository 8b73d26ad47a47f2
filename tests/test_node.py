from bulmakit.node import Element, element, render


def test_text_is_escaped():
    assert render(element("p", "a<b")) == "<p>a&lt;b</p>"


def test_void_element_has_no_closing_tag():
    assert render(element("hr", class_name="x")) == '<hr class="x">'


def test_true_attribute_is_bare():
    assert render(element("button", disabled=True)) == "<button disabled></button>"


def test_false_and_none_attributes_are_omitted():
    out = render(element("button", disabled=False, title=None))
    assert "disabled" not in out
    assert "title" not in out


def test_children_are_flattened_and_none_dropped():
    el = element("ul", ["a", None, ("b",)])
    assert el.children == ("a", "b")


def test_attribute_names_are_converted():
    el = element("label", for_="x", aria_hidden="true", class_name="c")
    assert el.attrs == {"for": "x", "aria-hidden": "true", "class": "c"}


def test_classes_splits_tokens():
    assert element("div", class_name="a  b ").classes() == ["a", "b"]
    assert element("div").classes() == []


def test_with_attrs_returns_copy():
    el = element("input", type="text")
    other = el.with_attrs([("name", "n")])
    assert other.attrs["name"] == "n"
    assert other.attrs["type"] == "text"
    assert "name" not in el.attrs


def test_render_method_matches_function():
    el = element("div", element("span", "x"), 5)
    assert el.render() == render(el)
    assert str(el) == el.render()


def test_render_of_misc_nodes():
    assert render(None) == ""
    assert render(5) == "5"
    assert render(["a", "b"]) == "ab"


def test_attribute_value_is_escaped():
    out = render(element("a", href='x"y'))
    assert '"y' not in out.replace('href="', "", 1).rstrip('"></a>') or "&quot;" in out
    assert "&quot;" in out


def test_element_is_dataclass_equal():
    assert element("div", "x", id="a") == Element("div", {"id": "a"}, ("x",))