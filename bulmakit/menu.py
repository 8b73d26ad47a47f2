"""Side menus."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def aside_menu(*args: Any, class_name: str = "") -> Element:
    return element("aside", *args, class_name=f"menu {class_name}")


def menu(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"menu {class_name}")


def menu_label(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"menu-label {class_name}")


def menu_list(*args: Any, class_name: str = "") -> Element:
    return element("ul", *args, class_name=f"menu-list {class_name}")


def menu_link(
    *args: Any, class_name: str = "", href: str = "", current_path: str | None = None
) -> Element:
    """A menu entry; it is marked active when current_path equals href exactly."""
    is_active = current_path is not None and current_path == href
    tokens = [class_name] if class_name else []
    if is_active:
        tokens.append("is-active")
    link = element(
        "a",
        *args,
        class_name=" ".join(tokens) or None,
        href=href,
        aria_current="page" if is_active else None,
    )
    return element("li", link)