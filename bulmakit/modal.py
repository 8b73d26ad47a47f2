"""Modal dialogs."""

from __future__ import annotations

from typing import Any

from .node import Element, element


def modal(
    *args: Any,
    is_active: bool,
    has_background: bool = True,
    has_close_button: bool = True,
    is_dismissible: bool = True,
) -> Element:
    """A modal; a dismissible one is closed by a click on its background."""
    parts: list[Any] = []
    if has_background:
        parts.append(
            element("div", class_name="modal-background", data_dismiss=is_dismissible)
        )
    parts.extend(args)
    if has_close_button:
        parts.append(modal_close())
    class_list = "modal is-active" if is_active else "modal"
    return element("div", parts, class_name=class_list)


def modal_close() -> Element:
    """The close button of a modal."""
    return element("a", class_name="modal-close is-large")


def modal_content(*args: Any) -> Element:
    """The content area of a modal."""
    return element("div", *args, class_name="modal-content")