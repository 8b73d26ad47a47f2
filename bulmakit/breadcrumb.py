"""Breadcrumb navigation."""

from __future__ import annotations

from typing import Any

from .enums import Alignment, BreadcrumbSeparator, Size
from .node import Element, element


def breadcrumb_class_list(
    class_name: str = "",
    alignment: Alignment = Alignment.DEFAULT,
    separator: BreadcrumbSeparator = BreadcrumbSeparator.DEFAULT,
    size: Size = Size.DEFAULT,
) -> str:
    """The class attribute of a breadcrumb."""
    class_list = "breadcrumb"
    if alignment is not Alignment.DEFAULT:
        class_list += f" is-{alignment.value}"
    if separator is not BreadcrumbSeparator.DEFAULT:
        class_list += f" has-{separator.value}-separator"
    class_list += size.modifier()
    if class_name:
        class_list += f" {class_name}"
    return class_list


def breadcrumb(
    *args: Any,
    class_name: str = "",
    alignment: Alignment = Alignment.DEFAULT,
    separator: BreadcrumbSeparator = BreadcrumbSeparator.DEFAULT,
    size: Size = Size.DEFAULT,
) -> Element:
    """A breadcrumb; the positional arguments are its items."""
    return element(
        "nav",
        element("ul", *args),
        class_name=breadcrumb_class_list(class_name, alignment, separator, size),
    )


def breadcrumb_item(*args: Any, is_active: bool = False, href: str | None = None) -> Element:
    """One breadcrumb entry."""
    return element(
        "li",
        element("a", *args, href=href),
        class_name="is-active" if is_active else None,
    )