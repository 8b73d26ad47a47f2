"""Page-number navigation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from .node import Element, element

_INTEGER = re.compile(r"[+-]?\d+")
_I16_MIN, _I16_MAX = -(2**15), 2**15 - 1


def current_page(query: Mapping[str, str]) -> int:
    """The page number in a query mapping; 1 when missing or not a valid number."""
    raw = query.get("page", "1")
    if not _INTEGER.fullmatch(raw):
        return 1
    number = int(raw)
    return number if _I16_MIN <= number <= _I16_MAX else 1


@dataclass(frozen=True)
class Pagination:
    """The state of a pagination bar: page count, current page and link path."""

    count: int
    page: int
    path: str
    list_size: int = 3

    @property
    def _left_side_size(self) -> int:
        return self.list_size // 2 - (self.list_size + 1) % 2

    @property
    def _right_side_size(self) -> int:
        return self.list_size // 2

    @property
    def _count_is_greater(self) -> bool:
        return self.count > self.list_size + 2

    def pages(self) -> range:
        """The page numbers shown between the first and the last page."""
        if not self._count_is_greater:
            return range(2, self.count)
        pg, cnt, size = self.page, self.count, self.list_size
        left, right = self._left_side_size, self._right_side_size
        if pg > cnt - size:
            start = cnt - size
        elif pg > left + 1:
            start = pg - left
        else:
            start = 2
        if pg <= size - right:
            end = size + 2
        elif pg < cnt - right:
            end = pg + right + 1
        else:
            end = cnt
        return range(start, end)

    def show_first_ellipsis(self) -> bool:
        return self._count_is_greater and self.page > self._left_side_size + 2

    def show_last_ellipsis(self) -> bool:
        return self._count_is_greater and self.page < self.count - self._right_side_size - 1

    def previous_page(self) -> int:
        return self.page - 1 if self.page > 1 else 1

    def next_page(self) -> int:
        return self.page + 1 if self.page < self.count else self.count

    def href(self, page: int) -> str:
        return f"{self.path}?page={page}"

    def _link(self, page: int) -> Element:
        current = "is-current" if self.page == page else ""
        return element("li", element("a", page, href=self.href(page), class_name=f"pagination-link {current}"))

    def render(self, class_name: str = "") -> Element:
        """Build the pagination navigation element."""
        ellipsis = element("li", element("span", "…", class_name="pagination-ellipsis"))
        previous_disabled = "is-disabled" if self.page <= 1 else ""
        next_disabled = "is-disabled" if self.count <= self.page else ""
        items = [self._link(1)]
        if self.show_first_ellipsis():
            items.append(ellipsis)
        items.extend(self._link(p) for p in self.pages())
        if self.show_last_ellipsis():
            items.append(ellipsis)
        if self.count > 1:
            items.append(self._link(self.count))
        return element(
            "nav",
            element("a", "Previous", href=self.href(self.previous_page()),
                    class_name=f"pagination-previous {previous_disabled}"),
            element("a", "Next", href=self.href(self.next_page()),
                    class_name=f"pagination-next {next_disabled}"),
            element("ul", items, class_name="pagination-list"),
            class_name=f"pagination {class_name}",
        )


def pagination(
    count: int,
    *,
    path: str,
    query: Mapping[str, str] | None = None,
    list_size: int = 3,
    class_name: str = "",
) -> Element:
    """Render a pagination bar for the page named in the query."""
    return Pagination(count, current_page(query or {}), path, list_size).render(class_name)