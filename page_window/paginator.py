"""Page-window computation for list views.

:class:`Paginator` is an immutable value object. The page count is derived
from the item totals on every access and each ``with_*`` method returns a
new instance, so no derived state can go stale between updates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, TypedDict, Union

from markupsafe import Markup

from .constants import DEFAULT_MAX_PAGES_TO_SHOW, ELLIPSIS, MIN_PAGES_TO_SHOW, NUM_PLACEHOLDER
from .labels import LabelProvider, default_labels


class InvalidConfiguration(ValueError):
    """Raised when a paginator or renderer is configured with unusable values."""


class PageDescriptor(TypedDict):
    """A single entry of the page window.

    ``num`` is the page number or :data:`ELLIPSIS`; ``url`` is ``None`` for
    ellipsis markers and for the current page.
    """

    num: Union[int, str]
    url: Optional[str]
    is_current: bool


def _check_max_pages_to_show(value: int) -> None:
    if value < MIN_PAGES_TO_SHOW:
        raise InvalidConfiguration(f"max_pages_to_show cannot be less than {MIN_PAGES_TO_SHOW}.")


@dataclass(frozen=True)
class Paginator:
    """Pagination state for one render of a list view.

    ``url_pattern`` is a URL containing ``(:num)`` where the page number
    goes, for example ``"/books/?page=(:num)"``. When ``previous_text`` or
    ``next_text`` is omitted it is resolved from ``labels``.
    """

    total_items: int
    items_per_page: int
    current_page: int
    url_pattern: str = ""
    max_pages_to_show: int = DEFAULT_MAX_PAGES_TO_SHOW
    previous_text: Optional[str] = None
    next_text: Optional[str] = None
    labels: LabelProvider = field(default=default_labels, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_max_pages_to_show(self.max_pages_to_show)
        if self.previous_text is None:
            object.__setattr__(self, "previous_text", self.labels("previous"))
        if self.next_text is None:
            object.__setattr__(self, "next_text", self.labels("next"))

    @property
    def num_pages(self) -> int:
        if self.items_per_page == 0:
            return 0
        return math.ceil(self.total_items / self.items_per_page)

    def with_max_pages_to_show(self, max_pages_to_show: int) -> "Paginator":
        _check_max_pages_to_show(max_pages_to_show)
        return replace(self, max_pages_to_show=max_pages_to_show)

    def with_items_per_page(self, items_per_page: int) -> "Paginator":
        return replace(self, items_per_page=items_per_page)

    def with_total_items(self, total_items: int) -> "Paginator":
        return replace(self, total_items=total_items)

    def with_current_page(self, current_page: int) -> "Paginator":
        return replace(self, current_page=current_page)

    def with_url_pattern(self, url_pattern: str) -> "Paginator":
        return replace(self, url_pattern=url_pattern)

    def with_previous_text(self, text: str) -> "Paginator":
        return replace(self, previous_text=text)

    def with_next_text(self, text: str) -> "Paginator":
        return replace(self, next_text=text)

    def page_url(self, page_num: int) -> str:
        return self.url_pattern.replace(NUM_PLACEHOLDER, str(page_num))

    def previous_page(self) -> Optional[int]:
        return self._page_if_valid(self.current_page - 1)

    def next_page(self) -> Optional[int]:
        return self._page_if_valid(self.current_page + 1)

    def previous_url(self) -> Optional[str]:
        page = self.previous_page()
        return None if page is None else self.page_url(page)

    def next_url(self) -> Optional[str]:
        page = self.next_page()
        return None if page is None else self.page_url(page)

    def _page_if_valid(self, page: int) -> Optional[int]:
        if 1 <= page <= self.num_pages:
            return page
        return None

    def first_item(self) -> Optional[int]:
        """1-based index of the first item on the current page.

        ``None`` when the current page lies outside ``1..num_pages``.
        """

        if not 1 <= self.current_page <= self.num_pages:
            return None
        return (self.current_page - 1) * self.items_per_page + 1

    def last_item(self) -> Optional[int]:
        """1-based index of the last item on the current page."""

        first = self.first_item()
        if first is None:
            return None
        return min(first + self.items_per_page - 1, self.total_items)

    def pages(self) -> List[PageDescriptor]:
        """Return the page window for the current state.

        Example with 10 pages, ``max_pages_to_show=7`` and page 5 current::

            [{'num': 1, 'url': '/p/1', 'is_current': False},
             {'num': '...', 'url': None, 'is_current': False},
             {'num': 3, 'url': '/p/3', 'is_current': False},
             {'num': 4, 'url': '/p/4', 'is_current': False},
             {'num': 5, 'url': None, 'is_current': True},
             {'num': 6, 'url': '/p/6', 'is_current': False},
             {'num': 7, 'url': '/p/7', 'is_current': False},
             {'num': '...', 'url': None, 'is_current': False},
             {'num': 10, 'url': '/p/10', 'is_current': False}]

        Page 1 and the last page are always present once the window is
        needed. At most ``max_pages_to_show`` numbered entries are returned;
        ellipsis markers come on top of that budget.
        """

        num_pages = self.num_pages
        if num_pages <= 1:
            return []
        if num_pages <= self.max_pages_to_show:
            return [self._page(num) for num in range(1, num_pages + 1)]

        # Sliding range centred on the current page.
        num_adjacent = (self.max_pages_to_show - 3) // 2
        if self.current_page + num_adjacent > num_pages:
            sliding_start = num_pages - self.max_pages_to_show + 2
        else:
            sliding_start = self.current_page - num_adjacent
        sliding_start = max(sliding_start, 2)
        sliding_end = min(sliding_start + self.max_pages_to_show - 3, num_pages - 1)

        pages = [self._page(1)]
        if sliding_start > 2:
            pages.append(self._ellipsis())
        pages.extend(self._page(num) for num in range(sliding_start, sliding_end + 1))
        if sliding_end < num_pages - 1:
            pages.append(self._ellipsis())
        pages.append(self._page(num_pages))
        return pages

    def _page(self, num: int) -> PageDescriptor:
        is_current = num == self.current_page
        return PageDescriptor(
            num=num,
            url=None if is_current else self.page_url(num),
            is_current=is_current,
        )

    @staticmethod
    def _ellipsis() -> PageDescriptor:
        return PageDescriptor(num=ELLIPSIS, url=None, is_current=False)

    def to_html(self, style: Optional[str] = None) -> Markup:
        from .rendering import default_renderer

        return default_renderer().render(self, style=style)

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return str(self.to_html())
