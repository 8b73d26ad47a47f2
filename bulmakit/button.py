"""Buttons, anchor buttons and button groups."""

from __future__ import annotations

from typing import Any

from .enums import Color, Size, State
from .node import Element, element


def button_class_list(
    class_name: str = "",
    color: Color = Color.DEFAULT,
    size: Size = Size.DEFAULT,
    state: State = State.DEFAULT,
    is_dark: bool = False,
    is_fullwidth: bool = False,
    is_inverted: bool = False,
    is_light: bool = False,
    is_outlined: bool = False,
    is_responsive: bool = False,
    is_rounded: bool = False,
) -> str:
    """The class attribute shared by buttons and anchor buttons."""
    class_list = "button" + color.modifier() + size.modifier()
    if state not in (State.DEFAULT, State.DISABLED):
        class_list += f" is-{state}"
    flags = (
        (is_dark, "is-dark"),
        (is_fullwidth, "is-fullwidth"),
        (is_inverted, "is-inverted"),
        (is_light, "is-light"),
        (is_outlined, "is-outlined"),
        (is_responsive, "is-responsive"),
        (is_rounded, "is-rounded"),
    )
    class_list += "".join(f" {name}" for enabled, name in flags if enabled)
    if class_name:
        class_list += f" {class_name}"
    return class_list


def a_button(
    *args: Any,
    class_name: str = "",
    color: Color = Color.DEFAULT,
    size: Size = Size.DEFAULT,
    state: State = State.DEFAULT,
    is_dark: bool = False,
    is_fullwidth: bool = False,
    is_inverted: bool = False,
    is_light: bool = False,
    is_outlined: bool = False,
    is_responsive: bool = False,
    is_rounded: bool = False,
    href: str | None = None,
    target: str | None = None,
    title: str | None = None,
) -> Element:
    """A link styled as a button."""
    class_list = button_class_list(
        class_name, color, size, state, is_dark, is_fullwidth, is_inverted,
        is_light, is_outlined, is_responsive, is_rounded,
    )
    return element(
        "a", *args, class_name=class_list, href=href, target=target, title=title,
        disabled=state is State.DISABLED,
    )


def button(
    *args: Any,
    button_type: str | None = None,
    class_name: str = "",
    color: Color = Color.DEFAULT,
    size: Size = Size.DEFAULT,
    state: State = State.DEFAULT,
    is_dark: bool = False,
    is_fullwidth: bool = False,
    is_inverted: bool = False,
    is_light: bool = False,
    is_outlined: bool = False,
    is_responsive: bool = False,
    is_rounded: bool = False,
    title: str | None = None,
) -> Element:
    """A button element."""
    class_list = button_class_list(
        class_name, color, size, state, is_dark, is_fullwidth, is_inverted,
        is_light, is_outlined, is_responsive, is_rounded,
    )
    return element(
        "button", *args, class_name=class_list, type=button_type, title=title,
        disabled=state is State.DISABLED,
    )


def buttons(
    *args: Any, class_name: str = "", size: Size = Size.DEFAULT, has_addons: bool = False
) -> Element:
    """A group of buttons."""
    class_list = "buttons"
    if size is not Size.DEFAULT:
        class_list += f" are-{size}"
    if has_addons:
        class_list += " has-addons"
    if class_name:
        class_list += f" {class_name}"
    return element("div", *args, class_name=class_list)