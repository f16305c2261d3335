"""Render a :class:`~page_window.paginator.Paginator` as an HTML fragment."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from flask import current_app, has_app_context
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .constants import DEFAULT_STYLE, STYLES
from .paginator import InvalidConfiguration, Paginator

logger = logging.getLogger(__name__)


def _resolve_style(style: Optional[str]) -> str:
    if style:
        return style
    if has_app_context():
        return current_app.config.get("PAGINATOR_STYLE") or DEFAULT_STYLE
    return DEFAULT_STYLE


class PaginationRenderer:
    """Turns page descriptors into markup using the packaged templates.

    Each style lives in ``templates/page_window/<style>.html`` and receives
    the paginator, its page window and the previous/next links.
    """

    def __init__(self, environment: Optional[Environment] = None) -> None:
        self.environment = environment or Environment(
            loader=PackageLoader("page_window", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, paginator: Paginator, style: Optional[str] = None) -> Markup:
        style = _resolve_style(style)
        if style not in STYLES:
            raise InvalidConfiguration(
                f"Unknown pagination style {style!r}; expected one of {', '.join(STYLES)}."
            )
        if paginator.num_pages <= 1:
            return Markup("")

        logger.debug(
            "Rendering %s pagination: page %s of %s",
            style,
            paginator.current_page,
            paginator.num_pages,
        )
        template = self.environment.get_template(f"page_window/{style}.html")
        html = template.render(
            paginator=paginator,
            pages=paginator.pages(),
            previous_url=paginator.previous_url(),
            next_url=paginator.next_url(),
            previous_text=paginator.previous_text,
            next_text=paginator.next_text,
        )
        return Markup(html.strip())


@lru_cache(maxsize=1)
def default_renderer() -> PaginationRenderer:
    return PaginationRenderer()
