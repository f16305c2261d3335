"""Label providers for the previous/next links.

A label provider is any callable that maps a key (``"previous"`` or
``"next"``) to a display string. Values may be :class:`markupsafe.Markup`
when the host application wants to inject its own fragment.
"""

from __future__ import annotations

from typing import Callable, Mapping

from flask import current_app, has_app_context

LabelProvider = Callable[[str], str]

DEFAULT_LABELS: dict[str, str] = {
    "previous": "Previous",
    "next": "Next",
}

RUSSIAN_LABELS: dict[str, str] = {
    "previous": "Предыдущая",
    "next": "Следующая",
}


def mapping_labels(
    mapping: Mapping[str, str], fallback: Mapping[str, str] = DEFAULT_LABELS
) -> LabelProvider:
    """Return a provider that looks keys up in ``mapping`` then ``fallback``."""

    def provider(key: str) -> str:
        if key in mapping:
            return mapping[key]
        return fallback.get(key, key)

    return provider


def default_labels(key: str) -> str:
    return DEFAULT_LABELS.get(key, key)


def config_labels() -> LabelProvider:
    """Build a provider from ``PAGINATOR_LABELS`` of the current Flask app.

    Outside an application context the English defaults are used.
    """

    if not has_app_context():
        return default_labels
    configured = current_app.config.get("PAGINATOR_LABELS") or {}
    return mapping_labels(configured)
