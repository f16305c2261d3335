"""Defaults shared by the paginator, the renderer and the Flask glue."""

NUM_PLACEHOLDER = "(:num)"
ELLIPSIS = "..."

DEFAULT_MAX_PAGES_TO_SHOW = 10
MIN_PAGES_TO_SHOW = 3

PER_PAGE_OPTIONS: tuple[int, ...] = (10, 20, 50, 100, 200)
DEFAULT_PER_PAGE = 20

DEFAULT_STYLE = "tailwind"
STYLES: tuple[str, ...] = ("tailwind", "bootstrap")
