"""Request helpers that feed :class:`~page_window.paginator.Paginator`."""
from __future__ import annotations

import re
from typing import Any, Sequence

from flask import Request, current_app, request, session, url_for

from ..constants import (
    DEFAULT_MAX_PAGES_TO_SHOW,
    DEFAULT_PER_PAGE,
    NUM_PLACEHOLDER,
    PER_PAGE_OPTIONS,
)
from ..labels import config_labels
from ..paginator import Paginator

SESSION_PER_PAGE_KEY = "pagination_per_page"

# url_for percent-encodes "(:num)", so build with a URL-safe marker first.
_PAGE_MARKER = "__page_num__"
_PAGE_ARG = re.compile(r"(?<=[?&])page=" + _PAGE_MARKER + r"(?=&|$)")


def _per_page_options() -> Sequence[int]:
    return current_app.config.get("PAGINATOR_PER_PAGE_OPTIONS", PER_PAGE_OPTIONS)


def _default_per_page() -> int:
    return current_app.config.get("PAGINATOR_DEFAULT_PER_PAGE", DEFAULT_PER_PAGE)


def _resolve_per_page(per_page: int) -> int:
    """Return a safe per-page value limited to the configured options."""

    if per_page in _per_page_options():
        return per_page
    current_app.logger.debug("Ignoring per_page=%s, not one of the allowed options", per_page)
    return _default_per_page()


def get_page_args(req: Request | None = None) -> tuple[int, int]:
    """Return sanitized pagination arguments from the given request.

    The page number is clamped to 1 and the per-page value is restricted to
    the allowed options to avoid accidentally requesting huge page sizes.
    An explicit ``per_page`` is remembered in the session for later requests.
    """

    req = req or request
    page = req.args.get("page", 1, type=int)
    per_page_arg = req.args.get("per_page", type=int)
    if per_page_arg is not None:
        per_page = _resolve_per_page(per_page_arg)
        session[SESSION_PER_PAGE_KEY] = per_page
    else:
        per_page = session.get(SESSION_PER_PAGE_KEY, _default_per_page())
        per_page = _resolve_per_page(per_page)
    if page < 1:
        current_app.logger.debug("Clamping page=%s to 1", page)
        page = 1
    return page, per_page


def _current_url(args: dict[str, Any]) -> str:
    view_args = dict(request.view_args or {})
    return url_for(request.endpoint, **view_args, **args)


def build_url_pattern(**overrides: Any) -> str:
    """Return the current URL with ``page`` replaced by the ``(:num)`` placeholder.

    Other query arguments are preserved; ``overrides`` replace or add query
    arguments, for example ``per_page``.
    """

    args = request.args.to_dict()
    args.update(overrides)
    args["page"] = _PAGE_MARKER
    return _PAGE_ARG.sub("page=" + NUM_PLACEHOLDER, _current_url(args), count=1)


def build_pagination_url(page: int, per_page: int | None = None) -> str:
    """Build a URL pointing to a specific page while preserving query args."""

    args = request.args.to_dict()
    args["page"] = page
    if per_page is not None:
        args["per_page"] = per_page
    return _current_url(args)


def paginator_from_request(total_items: int, req: Request | None = None) -> Paginator:
    """Build a paginator for the current request and application config."""

    page, per_page = get_page_args(req)
    return Paginator(
        total_items=total_items,
        items_per_page=per_page,
        current_page=page,
        url_pattern=build_url_pattern(),
        max_pages_to_show=current_app.config.get(
            "PAGINATOR_MAX_PAGES_TO_SHOW", DEFAULT_MAX_PAGES_TO_SHOW
        ),
        labels=config_labels(),
    )
