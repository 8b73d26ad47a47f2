"""Form inputs: text inputs, textareas, checkboxes, selects and file pickers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .node import Element, element

Attributes = Mapping[str, Any] | Iterable[tuple[str, Any]] | None


def _apply(node: Element, attributes: Attributes) -> Element:
    return node.with_attrs(attributes) if attributes else node


def text_input(
    *,
    class_name: str | None = None,
    element_id: str | None = None,
    input_type: str = "text",
    name: str | None = None,
    placeholder: str | None = None,
    value: str | None = None,
    attributes: Attributes = None,
) -> Element:
    """An input element; extra attributes are added last."""
    node = element(
        "input",
        class_name=f"input {class_name or ''}",
        type=input_type,
        id=element_id,
        name=name,
        placeholder=placeholder,
        value=value,
    )
    return _apply(node, attributes)


def textarea(
    *,
    class_name: str | None = None,
    element_id: str | None = None,
    name: str | None = None,
    placeholder: str | None = None,
    value: str | None = None,
    attributes: Attributes = None,
) -> Element:
    """A textarea whose content is the given value."""
    node = element(
        "textarea",
        value,
        class_name=f"textarea {class_name or ''}",
        id=element_id,
        name=name,
        placeholder=placeholder,
    )
    return _apply(node, attributes)


def checkbox(
    label: Any,
    *,
    class_name: str = "",
    element_id: str | None = None,
    name: str | None = None,
    value: str = "true",
    is_checked: bool = False,
    attributes: Attributes = None,
) -> Element:
    """A checkbox inside its label; extra attributes go to the input."""
    box = element(
        "input",
        id=element_id,
        name=name,
        type="checkbox",
        value=value,
        checked=is_checked,
    )
    return element(
        "label", _apply(box, attributes), " ", label, class_name=f"checkbox {class_name}"
    )


def option_elements(options: Iterable[tuple[str, str]], value: str | None) -> list[Element]:
    """Option elements from (text, value) pairs; the one equal to value is selected."""
    return [
        element(
            "option",
            text,
            value=option_value,
            selected="selected" if option_value == value else None,
        )
        for text, option_value in options
    ]


def select(
    *,
    element_id: str | None = None,
    name: str | None = None,
    options: Iterable[tuple[str, str]] = (),
    value: str | None = None,
    attributes: Attributes = None,
) -> Element:
    """A styled select; extra attributes go to the wrapper."""
    node = element(
        "div",
        element("select", option_elements(options, value), id=element_id, name=name),
        class_name="select",
    )
    return _apply(node, attributes)


def join_file_names(names: Iterable[str]) -> str:
    """The chosen file names as shown next to a file input."""
    return ", ".join(names)


def file_input(
    *,
    accept: str | None = None,
    element_id: str | None = None,
    label: Any = None,
    multiple: bool = False,
    name: str | None = None,
    file_names: Iterable[str] = (),
) -> Element:
    """A file picker showing the chosen file names and, if any, a clear button."""
    names = list(file_names)
    has_file = bool(names)
    parts: list[Any] = [
        element(
            "input",
            accept=accept,
            class_name="file-input",
            id=element_id,
            multiple=multiple,
            name=name,
            type="file",
        ),
        element(
            "span",
            element("span", "↥", class_name="file-icon"),
            element("span", label, class_name="file-label"),
            class_name="file-cta",
        ),
        element("span", join_file_names(names), class_name="file-name"),
    ]
    if has_file:
        parts.append(
            element(
                "a",
                element("span", "☓", class_name="icon"),
                class_name="button file-clear",
                title="Clear",
            )
        )
    class_list = "file has-name is-fullwidth" + (" has-file" if has_file else "")
    return element("div", element("label", parts, class_name="file-label"), class_name=class_list)