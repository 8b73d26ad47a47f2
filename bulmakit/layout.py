"""Page layout containers."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def section(*args: Any, class_name: str = "") -> Element:
    """A page section."""
    return element("section", *args, class_name=f"section {class_name}")