"""Tables with header, body and footer sections built from data."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .node import Element, element

T = TypeVar("T")


def table(*args: Any, class_name: str = "") -> Element:
    """A table element."""
    return element("table", *args, class_name=f"table {class_name}")


def tbody(
    rows: Iterable[T], render_row: Callable[[T], Any], *, class_name: str = ""
) -> Element:
    """A table body with one row per item; render_row gives the row's cells."""
    return element(
        "tbody",
        [element("tr", render_row(row)) for row in rows],
        class_name=class_name,
    )


def _header_row(tag: str, cells: Iterable[T], render_cell: Callable[[T], Any], class_name: str) -> Element:
    return element(
        tag,
        element("tr", [element("th", render_cell(cell)) for cell in cells]),
        class_name=class_name,
    )


def thead(
    cells: Iterable[T], render_cell: Callable[[T], Any], *, class_name: str = ""
) -> Element:
    """A table head with a single row of header cells."""
    return _header_row("thead", cells, render_cell, class_name)


def tfoot(
    cells: Iterable[T], render_cell: Callable[[T], Any], *, class_name: str = ""
) -> Element:
    """A table foot with a single row of header cells."""
    return _header_row("tfoot", cells, render_cell, class_name)