import pytest

from bulmakit.menu import aside_menu, menu, menu_label, menu_link, menu_list


@pytest.mark.parametrize(
    "builder, tag, base",
    [
        (aside_menu, "aside", "menu"),
        (menu, "div", "menu"),
        (menu_label, "div", "menu-label"),
        (menu_list, "ul", "menu-list"),
    ],
)
def test_containers(builder, tag, base):
    el = builder("child", class_name="extra")
    assert el.tag == tag
    assert el.classes() == [base, "extra"]
    assert el.children == ("child",)


def test_link_inactive():
    li = menu_link("Home", href="/", current_path="/other")
    (a,) = li.children
    assert li.tag == "li"
    assert a.attrs["href"] == "/"
    assert "is-active" not in a.classes()
    assert a.attrs["aria-current"] is None


def test_link_active_on_exact_match():
    li = menu_link("Home", class_name="x", href="/docs", current_path="/docs")
    (a,) = li.children
    assert a.classes() == ["x", "is-active"]
    assert a.attrs["aria-current"] == "page"


def test_link_not_active_on_prefix():
    (a,) = menu_link("Docs", href="/docs", current_path="/docs/page").children
    assert "is-active" not in a.classes()


def test_link_without_current_path():
    (a,) = menu_link("Docs", href="").children
    assert a.classes() == []