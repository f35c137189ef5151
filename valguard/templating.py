# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Failure message rendering.

A message template is a plain string. Every occurrence of :data:`MARKER` is
replaced with a diagnostic rendering of the rejected value; nothing else in
the template is interpreted, so braces that are not the marker stay as they
are.

Rendering is total: cyclic containers are cut off at a fixed depth, objects
whose ``__repr__`` raises fall back to the default ``object.__repr__`` form
and the result is truncated to ``VALGUARD_MESSAGE_MAXLEN`` characters.
"""

from __future__ import annotations

import reprlib
from typing import Any, Final, Optional

from .config import Settings, get_settings

MARKER: Final[str] = "{value}"

_ELLIPSIS: Final[str] = "..."
_UNREPRESENTABLE: Final[str] = "<unrepresentable value>"


def _fallback_repr(value: Any) -> str:
    try:
        return object.__repr__(value)
    except Exception:
        return _UNREPRESENTABLE


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    if limit <= len(_ELLIPSIS):
        return text[:limit]
    return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS


def inspect_value(value: Any, settings: Optional[Settings] = None) -> str:
    """Return a bounded, cycle-safe textual rendering of *value*."""

    settings = settings or get_settings()

    formatter = reprlib.Repr()
    formatter.maxlevel = settings.repr_maxlevel
    formatter.maxstring = settings.repr_maxstring
    formatter.maxother = settings.repr_maxstring
    formatter.maxlong = settings.repr_maxstring

    try:
        text = formatter.repr(value)
    except Exception:
        text = _fallback_repr(value)

    if not isinstance(text, str):
        text = _fallback_repr(value)
    return _truncate(text, settings.message_maxlen)


def render(template: str, value: Any, settings: Optional[Settings] = None) -> str:
    """Substitute every :data:`MARKER` in *template* with *value*.

    Templates without a marker are returned unchanged.
    """

    if not isinstance(template, str):
        template = _fallback_repr(template)
    if MARKER not in template:
        return template
    return template.replace(MARKER, inspect_value(value, settings))


__all__ = [
    "MARKER",
    "inspect_value",
    "render",
]
