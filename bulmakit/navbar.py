"""Navigation bars."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def _with_flags(base: str, *flags: tuple[bool, str]) -> str:
    return base + "".join(f" {name}" for on, name in flags if on)


def navbar(*args: Any, class_name: str = "") -> Element:
    return element("nav", *args, class_name=f"navbar {class_name}")


def navbar_brand(*args: Any) -> Element:
    return element("nav", *args, class_name="navbar-brand")


def navbar_burger(*, is_active: bool) -> Element:
    """The burger button that opens the menu on small screens."""
    return element(
        "a",
        [element("span", aria_hidden="true") for _ in range(4)],
        class_name=_with_flags("navbar-burger", (is_active, "is-active")),
    )


def navbar_divider() -> Element:
    return element("hr", class_name="navbar-divider")


def navbar_end(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"navbar-end {class_name}")


def navbar_item(
    *args: Any,
    class_name: str = "",
    href: str | None = None,
    target: str | None = None,
    title: str | None = None,
) -> Element:
    return element(
        "a", *args, class_name=f"navbar-item {class_name}", href=href, target=target, title=title
    )


def navbar_item_dropdown(
    trigger: Any,
    *args: Any,
    dropdown_class: str = "",
    href: str | None = None,
    is_active: bool = False,
    is_hoverable: bool = False,
) -> Element:
    """A navbar item that opens a dropdown; trigger may be a node or a callable."""
    content = trigger() if callable(trigger) else trigger
    return element(
        "div",
        element("a", content, class_name="navbar-link", href=href),
        element("div", *args, class_name=f"navbar-dropdown {dropdown_class}"),
        class_name=_with_flags(
            "navbar-item has-dropdown", (is_active, "is-active"), (is_hoverable, "is-hoverable")
        ),
    )


def navbar_menu(*args: Any, class_name: str = "", is_active: bool = False) -> Element:
    return element(
        "div",
        *args,
        class_name=_with_flags(f"navbar-menu {class_name}", (is_active, "is-active")),
    )


def navbar_start(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"navbar-start {class_name}")