"""Modifier values shared by the components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class Alignment(_StrEnum):
    CENTERED = "centered"
    DEFAULT = "default"
    RIGHT = "right"


@dataclass(frozen=True)
class Color:
    """A Bulma color; the named ones are class attributes, others come from custom()."""

    value: str
    is_custom: bool = False

    DANGER: ClassVar[Color]
    DEFAULT: ClassVar[Color]
    INFO: ClassVar[Color]
    LINK: ClassVar[Color]
    PRIMARY: ClassVar[Color]
    SUCCESS: ClassVar[Color]
    TEXT: ClassVar[Color]
    WARNING: ClassVar[Color]

    @classmethod
    def custom(cls, value: str) -> Color:
        return cls(value, True)

    def __str__(self) -> str:
        return self.value

    def modifier(self) -> str:
        """The text to append to a class list, empty for the default color."""
        if self == Color.DEFAULT:
            return ""
        return f" is-{self.value}"


Color.DANGER = Color("danger")
Color.DEFAULT = Color("default")
Color.INFO = Color("info")
Color.LINK = Color("link")
Color.PRIMARY = Color("primary")
Color.SUCCESS = Color("success")
Color.TEXT = Color("text")
Color.WARNING = Color("warning")


class Size(_StrEnum):
    DEFAULT = "default"
    LARGE = "large"
    MEDIUM = "medium"
    NORMAL = "normal"
    SMALL = "small"

    def modifier(self) -> str:
        """The text to append to a class list, empty for the default size."""
        if self is Size.DEFAULT:
            return ""
        return f" is-{self.value}"


class BreadcrumbSeparator(_StrEnum):
    ARROW = "arrow"
    BULLET = "bullet"
    DEFAULT = "default"
    DOT = "dot"
    SUCCEEDS = "ducceeds"


class State(_StrEnum):
    ACTIVE = "active"
    DEFAULT = "default"
    DISABLED = "disabled"
    FOCUSED = "focused"
    HOVERED = "hovered"
    LOADING = "loading"