"""Icon containers."""

from __future__ import annotations

from typing import Any

from .enums import Size
from .node import Element, element


def icon_class_list(class_name: str = "", size: Size = Size.DEFAULT, is_scaled: bool = False) -> str:
    class_list = "icon" + size.modifier()
    if is_scaled:
        class_list += " is-scaled"
    if class_name:
        class_list += f" {class_name}"
    return class_list


def icon(
    *args: Any, class_name: str = "", size: Size = Size.DEFAULT, is_scaled: bool = False
) -> Element:
    """A span that holds an icon."""
    return element("span", *args, class_name=icon_class_list(class_name, size, is_scaled))


def icon_text(
    text: Any,
    *args: Any,
    class_name: str = "",
    icon_class: str = "",
    text_class: str = "",
    size: Size = Size.DEFAULT,
    is_scaled: bool = False,
) -> Element:
    """An icon followed by text; text may be a node or a callable returning one."""
    content = text() if callable(text) else text
    return element(
        "span",
        icon(*args, class_name=icon_class, size=size, is_scaled=is_scaled),
        element("span", content, class_name=text_class),
        class_name=f"icon-text {class_name}",
    )