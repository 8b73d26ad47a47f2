"""Form layout pieces: fields, controls, help text and labels."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def control(*args: Any, class_name: str = "") -> Element:
    """A form control wrapper."""
    return element("div", *args, class_name=f"control {class_name}")


def field(*args: Any, class_name: str = "") -> Element:
    """A form field grouping a label, controls and help."""
    return element("div", *args, class_name=f"field {class_name}")


def help_text(*args: Any, class_name: str = "") -> Element:
    """Help or error text shown below a control."""
    return element("div", *args, class_name=f"help {class_name}")


def label(*args: Any, for_id: str | None = None) -> Element:
    """A field label, optionally bound to the element with id for_id."""
    return element("label", *args, class_name="label", for_=for_id)