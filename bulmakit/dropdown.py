"""Dropdown menus."""

from __future__ import annotations

from typing import Any

from .button import button
from .node import Element, element


def toggled(is_active: bool, is_hoverable: bool) -> bool:
    """The active state after the trigger is clicked; hoverable dropdowns stay closed."""
    if is_hoverable:
        return False
    return not is_active


def dropdown(
    trigger: Any,
    *args: Any,
    class_name: str = "",
    is_active: bool = False,
    is_right: bool = False,
    is_up: bool = False,
    is_hoverable: bool = False,
) -> Element:
    """A dropdown; trigger is the button content (a node or a callable returning one)."""
    flags = (
        (is_active, "is-active"),
        (is_hoverable, "is-hoverable"),
        (is_right, "is-right"),
        (is_up, "is-up"),
    )
    class_list = f"dropdown {class_name}" + "".join(f" {name}" for on, name in flags if on)
    content = trigger() if callable(trigger) else trigger
    return element(
        "div",
        element("div", button(content), class_name="dropdown-trigger"),
        element("div", element("div", *args, class_name="dropdown-content"), class_name="dropdown-menu"),
        class_name=class_list,
    )


def dropdown_divider() -> Element:
    """A divider line between dropdown items."""
    return element("hr", class_name="dropdown-divider")


def dropdown_item(*args: Any, class_name: str = "", href: str | None = None) -> Element:
    """One dropdown entry."""
    return element("a", *args, class_name=f"dropdown-item {class_name}", href=href)