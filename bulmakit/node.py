"""A small HTML element tree with rendering to markup."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

_VOID_TAGS = frozenset(
    {"area", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


def _attr_name(key: str) -> str:
    if key == "class_name":
        return "class"
    return key.rstrip("_").replace("_", "-")


def _flatten(items: Iterable[Any]) -> Iterable[Any]:
    for item in items:
        if item is None or isinstance(item, bool):
            continue
        if isinstance(item, (str, Element, int, float)):
            yield item
        elif isinstance(item, Iterable):
            yield from _flatten(item)
        else:
            yield item


@dataclass(frozen=True)
class Element:
    """An HTML element with attributes and children."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: tuple[Any, ...] = ()

    def render(self) -> str:
        """Render this element and its children as HTML."""
        parts = [f"<{self.tag}"]
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
        parts.append(">")
        if self.tag in _VOID_TAGS:
            return "".join(parts)
        parts.extend(render(child) for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)

    def classes(self) -> list[str]:
        """The tokens of the class attribute."""
        value = self.attrs.get("class")
        return str(value).split() if value else []

    def with_attrs(self, attrs: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> Element:
        """Return a copy with the given attributes added or replaced."""
        merged = dict(self.attrs)
        merged.update(dict(attrs))
        return replace(self, attrs=merged)

    def __str__(self) -> str:
        return self.render()


def element(tag: str, *args: Any, **kwargs: Any) -> Element:
    """Build an element; positional arguments are children, keywords attributes."""
    attrs = {_attr_name(key): value for key, value in kwargs.items()}
    return Element(tag, attrs, tuple(_flatten(args)))


def render(node: Any) -> str:
    """Render any node (element, text, number, iterable or None) as HTML."""
    if node is None or isinstance(node, bool):
        return ""
    if isinstance(node, Element):
        return node.render()
    if isinstance(node, str):
        return html.escape(node, quote=False)
    if isinstance(node, (int, float)):
        return str(node)
    if isinstance(node, Iterable):
        return "".join(render(child) for child in node)
    return html.escape(str(node), quote=False)