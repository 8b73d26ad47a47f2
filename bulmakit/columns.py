"""Column layout containers."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def columns(*args: Any, class_name: str = "") -> Element:
    """A columns container."""
    return element("div", *args, class_name=f"columns {class_name}")


def column(*args: Any, class_name: str = "", is_: str = "", is_offset: str = "") -> Element:
    """A single column, optionally sized and offset."""
    class_list = "column"
    if is_:
        class_list += f" is-{is_}"
    if is_offset:
        class_list += f" is-offset-{is_offset}"
    class_list += f" {class_name}"
    return element("div", *args, class_name=class_list)