"""Tags and tag groups."""

from __future__ import annotations

from typing import Any

from .enums import Color, Size
from .node import Element, element


def tag(
    *args: Any,
    class_name: str = "",
    color: Color = Color.DEFAULT,
    size: Size = Size.DEFAULT,
    is_dark: bool = False,
    is_delete: bool = False,
    is_hoverable: bool = False,
    is_light: bool = False,
    is_rounded: bool = False,
) -> Element:
    """A small tag label."""
    class_list = "tag" + color.modifier() + size.modifier()
    flags = (
        (is_dark, "is-dark"),
        (is_delete, "is-delete"),
        (is_hoverable, "is-hoverable"),
        (is_light, "is-light"),
        (is_rounded, "is-rounded"),
    )
    class_list += "".join(f" {name}" for enabled, name in flags if enabled)
    if class_name:
        class_list += f" {class_name}"
    return element("span", *args, class_name=class_list)


def tags(
    *args: Any, class_name: str = "", size: Size = Size.DEFAULT, has_addons: bool = False
) -> Element:
    """A group of tags."""
    class_list = "tags"
    if size is not Size.DEFAULT:
        class_list += f" are-{size}"
    if has_addons:
        class_list += " has-addons"
    if class_name:
        class_list += f" {class_name}"
    return element("div", *args, class_name=class_list)