"""Basic elements: block, box, titles, progress and notification."""

from __future__ import annotations

from typing import Any

from .enums import Color, Size
from .node import Element, element


def block(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"block {class_name}")


def box(*args: Any, class_name: str = "") -> Element:
    return element("div", *args, class_name=f"box {class_name}")


def title(
    *args: Any, class_name: str = "", element_id: str | None = None, is_: int | None = None
) -> Element:
    class_list = f"title {class_name}"
    if is_ is not None:
        class_list += f" is-{is_}"
    return element("div", *args, class_name=class_list, id=element_id)


def subtitle(*args: Any, class_name: str = "", is_: int | None = None) -> Element:
    class_list = f"subtitle {class_name}"
    if is_ is not None:
        class_list += f" is-{is_}"
    return element("div", *args, class_name=class_list)


def progress(
    *args: Any,
    max: int,
    value: int | None = None,
    class_name: str = "",
    color: Color = Color.DEFAULT,
    size: Size = Size.DEFAULT,
) -> Element:
    """A progress bar; without a value it is indeterminate."""
    class_list = "progress" + color.modifier() + size.modifier()
    if class_name:
        class_list += f" {class_name}"
    return element("progress", *args, class_name=class_list, max=max, value=value)


def notification(
    *args: Any,
    is_active: bool,
    class_name: str = "",
    color: Color = Color.DEFAULT,
    is_light: bool = False,
) -> Element | None:
    """A dismissible notification, or None when it is not active."""
    if not is_active:
        return None
    class_list = "notification" + color.modifier()
    if is_light:
        class_list += " is-light"
    if class_name:
        class_list += f" {class_name}"
    return element("div", element("button", class_name="delete"), *args, class_name=class_list)