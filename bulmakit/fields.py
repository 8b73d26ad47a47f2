"""Complete form fields with label, control and error help."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from . import form
from .inputs import checkbox, option_elements
from .node import Element, element


def normalize_error(error: str | None) -> str | None:
    """Trim an error message; None means there is no error."""
    return None if error is None else error.strip()


def _error_help(error: str | None) -> Element | None:
    error_text = normalize_error(error)
    if error_text is None:
        return None
    return form.help_text(error_text, class_name="is-danger")


def _label(text: Any, element_id: str | None) -> Element | None:
    return None if text is None else form.label(text, for_id=element_id)


def _node(content: Any) -> Any:
    return content() if callable(content) else content


def checkbox_field(
    label: Any,
    *,
    error: str | None = None,
    element_id: str | None = None,
    name: str | None = None,
    value: str = "true",
    is_checked: bool = False,
) -> Element:
    """A checkbox with optional error help."""
    box = checkbox(label, element_id=element_id, name=name, value=value, is_checked=is_checked)
    return form.field(form.control(box), _error_help(error))


def password_field(
    *,
    error: str | None = None,
    element_id: str | None = None,
    label: Any = None,
    name: str | None = None,
    placeholder: str | None = None,
    value: str | None = None,
    is_visible: bool = False,
) -> Element:
    """A password input with a visibility toggle button."""
    has_error = normalize_error(error) is not None
    masked_entry = element(
        "input",
        class_name="input is-danger" if has_error else "input",
        id=element_id,
        type="text" if is_visible else "password",
        name=name,
        placeholder=placeholder,
        value=value,
    )
    visibility_icon = element(
        "span",
        "👁",
        style=f"text-decoration: {'none' if is_visible else 'line-through'}",
    )
    toggle = element(
        "a",
        visibility_icon,
        class_name="button is-danger is-outlined" if has_error else "button",
    )
    return form.field(
        _label(label, element_id),
        form.field(
            form.control(masked_entry, class_name="is-expanded"),
            form.control(toggle),
            class_name="has-addons",
        ),
        _error_help(error),
    )


def select_field(
    *,
    error: str | None = None,
    element_id: str | None = None,
    label: Any = None,
    name: str | None = None,
    options: Iterable[tuple[str, str]] = (),
    value: str | None = None,
) -> Element:
    """A select with label and optional error help."""
    has_error = normalize_error(error) is not None
    select_node = element("select", option_elements(options, value), id=element_id, name=name)
    wrapper = element(
        "div", select_node, class_name="select is-danger" if has_error else "select"
    )
    return form.field(
        _label(label, element_id),
        form.control(wrapper, class_name="is-expanded"),
        _error_help(error),
    )


def text_field(
    *,
    error: str | None = None,
    element_id: str | None = None,
    input_type: str = "text",
    label: Any = None,
    name: str | None = None,
    placeholder: str | None = None,
    value: str | None = None,
    addon_left: Any = None,
    addon_right: Any = None,
) -> Element:
    """A text input with label, optional addons on either side and error help."""
    has_error = normalize_error(error) is not None
    left = None if addon_left is None else form.control(_node(addon_left))
    right = None if addon_right is None else form.control(_node(addon_right))
    text_node = element(
        "input",
        class_name="input is-danger" if has_error else "input",
        id=element_id,
        type=input_type,
        name=name,
        placeholder=placeholder,
        value=value,
    )
    inner_class = "has-addons" if left is not None or right is not None else ""
    return form.field(
        _label(label, element_id),
        form.field(
            left,
            form.control(text_node, class_name="is-expanded"),
            right,
            class_name=inner_class,
        ),
        _error_help(error),
    )


def textarea_field(
    *,
    error: str | None = None,
    element_id: str | None = None,
    label: Any = None,
    name: str | None = None,
    placeholder: str | None = None,
    value: str | None = None,
) -> Element:
    """A textarea with label and optional error help."""
    has_error = normalize_error(error) is not None
    area = element(
        "textarea",
        value,
        class_name="textarea is-danger" if has_error else "textarea",
        id=element_id,
        name=name,
        placeholder=placeholder,
    )
    return form.field(
        _label(label, element_id),
        form.control(area, class_name="is-expanded"),
        _error_help(error),
    )