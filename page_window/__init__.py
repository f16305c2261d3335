import os

from flask import Flask

from .constants import (
    DEFAULT_MAX_PAGES_TO_SHOW,
    DEFAULT_PER_PAGE,
    DEFAULT_STYLE,
    ELLIPSIS,
    MIN_PAGES_TO_SHOW,
    NUM_PLACEHOLDER,
    PER_PAGE_OPTIONS,
    STYLES,
)
from .labels import DEFAULT_LABELS, RUSSIAN_LABELS, config_labels, mapping_labels
from .paginator import InvalidConfiguration, PageDescriptor, Paginator
from .rendering import PaginationRenderer, default_renderer
from .utils.pagination import (
    build_pagination_url,
    build_url_pattern,
    get_page_args,
    paginator_from_request,
)

__all__ = [
    "DEFAULT_LABELS",
    "ELLIPSIS",
    "NUM_PLACEHOLDER",
    "RUSSIAN_LABELS",
    "InvalidConfiguration",
    "PageDescriptor",
    "PaginationRenderer",
    "Paginator",
    "build_pagination_url",
    "build_url_pattern",
    "config_labels",
    "get_page_args",
    "init_app",
    "mapping_labels",
    "paginator_from_request",
]


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.") from exc


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _config_defaults() -> dict:
    style = os.environ.get("PAGINATOR_STYLE", "")
    return {
        "PAGINATOR_MAX_PAGES_TO_SHOW": _env_int("PAGINATOR_MAX_PAGES_TO_SHOW", DEFAULT_MAX_PAGES_TO_SHOW),
        "PAGINATOR_STYLE": style.strip() or DEFAULT_STYLE,
        "PAGINATOR_PER_PAGE_OPTIONS": PER_PAGE_OPTIONS,
        "PAGINATOR_DEFAULT_PER_PAGE": DEFAULT_PER_PAGE,
        "PAGINATOR_LABELS": {},
    }


def _validate_config(app: Flask) -> None:
    config = app.config
    max_pages = config["PAGINATOR_MAX_PAGES_TO_SHOW"]
    if not _is_int(max_pages):
        raise InvalidConfiguration(f"PAGINATOR_MAX_PAGES_TO_SHOW must be an integer, got {max_pages!r}.")
    if max_pages < MIN_PAGES_TO_SHOW:
        raise InvalidConfiguration(
            f"PAGINATOR_MAX_PAGES_TO_SHOW cannot be less than {MIN_PAGES_TO_SHOW}."
        )
    if config["PAGINATOR_STYLE"] not in STYLES:
        raise InvalidConfiguration(
            f"PAGINATOR_STYLE must be one of {', '.join(STYLES)}, got {config['PAGINATOR_STYLE']!r}."
        )
    options = config["PAGINATOR_PER_PAGE_OPTIONS"]
    if isinstance(options, (str, bytes)) or not hasattr(options, "__iter__"):
        raise InvalidConfiguration("PAGINATOR_PER_PAGE_OPTIONS must be a sequence of page sizes.")
    options = tuple(options)
    if not options or not all(_is_int(option) and option > 0 for option in options):
        raise InvalidConfiguration("PAGINATOR_PER_PAGE_OPTIONS must hold positive page sizes.")
    if config["PAGINATOR_DEFAULT_PER_PAGE"] not in options:
        app.logger.warning(
            "PAGINATOR_DEFAULT_PER_PAGE=%s is not in PAGINATOR_PER_PAGE_OPTIONS; using %s.",
            config["PAGINATOR_DEFAULT_PER_PAGE"],
            options[0],
        )
        config["PAGINATOR_DEFAULT_PER_PAGE"] = options[0]


def init_app(app: Flask) -> None:
    """Configure ``app`` and expose the pagination helpers to its templates."""

    for key, value in _config_defaults().items():
        app.config.setdefault(key, value)
    _validate_config(app)

    renderer = default_renderer()

    def render_pagination(paginator: Paginator, style=None):
        return renderer.render(paginator, style=style)

    app.add_template_global(render_pagination, "render_pagination")

    @app.context_processor
    def inject_pagination_helpers():
        return {
            "pagination_per_page_options": app.config["PAGINATOR_PER_PAGE_OPTIONS"],
            "pagination_build_url": build_pagination_url,
            "paginator_from_request": paginator_from_request,
        }
