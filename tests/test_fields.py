from bulmakit.fields import (
    checkbox_field,
    normalize_error,
    password_field,
    select_field,
    text_field,
    textarea_field,
)
from bulmakit.node import Element, element


def find_all(node, tag):
    found = []
    if isinstance(node, Element):
        if node.tag == tag:
            found.append(node)
        for child in node.children:
            found.extend(find_all(child, tag))
    return found


def helps(node):
    return [d for d in find_all(node, "div") if "help" in d.classes()]


def test_normalize_error():
    assert normalize_error("  broken  ") == "broken"
    assert normalize_error(None) is None


def test_checkbox_field_without_error():
    node = checkbox_field("Agree", name="agree")
    assert helps(node) == []
    assert find_all(node, "input")[0].attrs["name"] == "agree"


def test_checkbox_field_with_error():
    node = checkbox_field("Agree", error=" required ")
    (help_node,) = helps(node)
    assert help_node.classes() == ["help", "is-danger"]
    assert help_node.children == ("required",)


def test_password_field_hidden_by_default():
    node = password_field(element_id="pw", label="Password")
    (inp,) = find_all(node, "input")
    assert inp.attrs["type"] == "password"
    assert inp.classes() == ["input"]
    assert find_all(node, "label")[0].attrs["for"] == "pw"


def test_password_field_visible_and_error():
    node = password_field(is_visible=True, error="bad")
    (inp,) = find_all(node, "input")
    assert inp.attrs["type"] == "text"
    assert inp.classes() == ["input", "is-danger"]
    (toggle,) = find_all(node, "a")
    assert toggle.classes() == ["button", "is-danger", "is-outlined"]
    assert find_all(node, "label") == []


def test_select_field_error_and_selection():
    node = select_field(options=[("A", "a"), ("B", "b")], value="b", error="pick")
    wrapper = [d for d in find_all(node, "div") if "select" in d.classes()][0]
    assert wrapper.classes() == ["select", "is-danger"]
    selected = [o for o in find_all(node, "option") if o.attrs["selected"]]
    assert [o.attrs["value"] for o in selected] == ["b"]
    assert len(helps(node)) == 1


def test_text_field_without_addons():
    node = text_field(label="Name", value="v")
    inner = node.children[1]
    assert inner.classes() == ["field"]
    assert find_all(node, "input")[0].attrs["value"] == "v"


def test_text_field_with_addons():
    node = text_field(addon_left=element("span", "@"), addon_right=lambda: element("span", "!"))
    inner = node.children[0]
    assert inner.classes() == ["field", "has-addons"]
    assert len(inner.children) == 3
    assert [c.classes() for c in inner.children][1] == ["control", "is-expanded"]


def test_textarea_field():
    node = textarea_field(value="text", error="too short", label="Body", element_id="b")
    (area,) = find_all(node, "textarea")
    assert area.classes() == ["textarea", "is-danger"]
    assert area.children == ("text",)
    assert helps(node)[0].children == ("too short",)