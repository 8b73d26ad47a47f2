import pytest

from bulmakit.breadcrumb import breadcrumb, breadcrumb_class_list, breadcrumb_item
from bulmakit.enums import Alignment, BreadcrumbSeparator, Size


def test_default_class_list():
    assert breadcrumb_class_list() == "breadcrumb"


@pytest.mark.parametrize("alignment", [Alignment.CENTERED, Alignment.RIGHT])
def test_alignment_modifier(alignment):
    tokens = breadcrumb_class_list(alignment=alignment).split()
    assert tokens == ["breadcrumb", f"is-{alignment.value}"]


@pytest.mark.parametrize(
    "separator",
    [s for s in BreadcrumbSeparator if s is not BreadcrumbSeparator.DEFAULT],
)
def test_separator_modifier(separator):
    tokens = breadcrumb_class_list(separator=separator).split()
    assert tokens == ["breadcrumb", f"has-{separator.value}-separator"]


def test_size_modifier_and_custom_class_order():
    tokens = breadcrumb_class_list("extra", Alignment.RIGHT, BreadcrumbSeparator.DOT, Size.SMALL).split()
    assert tokens == [
        "breadcrumb",
        f"is-{Alignment.RIGHT.value}",
        f"has-{BreadcrumbSeparator.DOT.value}-separator",
        f"is-{Size.SMALL.value}",
        "extra",
    ]


def test_breadcrumb_wraps_items_in_list():
    items = [breadcrumb_item("Home", href="#"), breadcrumb_item("Page", href="#", is_active=True)]
    nav = breadcrumb(*items, size=Size.LARGE)
    assert nav.tag == "nav"
    (ul,) = nav.children
    assert ul.tag == "ul"
    assert ul.children == tuple(items)
    assert nav.classes() == ["breadcrumb", f"is-{Size.LARGE.value}"]


def test_item_active_class():
    active = breadcrumb_item("x", is_active=True)
    inactive = breadcrumb_item("x")
    assert active.classes() == ["is-active"]
    assert inactive.classes() == []


def test_item_link_href():
    item = breadcrumb_item("Docs", href="/docs")
    (link,) = item.children
    assert link.tag == "a"
    assert link.attrs["href"] == "/docs"
    assert link.children == ("Docs",)