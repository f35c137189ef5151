# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment driven settings.

Values are read from the environment on every call so tests and long running
processes can adjust them with ``monkeypatch.setenv`` / ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_REPR_MAXLEVEL = 4
DEFAULT_REPR_MAXSTRING = 80
DEFAULT_MESSAGE_MAXLEN = 400


@dataclass(frozen=True)
class Settings:
    """Rendering limits used when a rejected value is put into a message."""

    repr_maxlevel: int = DEFAULT_REPR_MAXLEVEL
    repr_maxstring: int = DEFAULT_REPR_MAXSTRING
    message_maxlen: int = DEFAULT_MESSAGE_MAXLEN


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed %s=%r; using %d", name, raw, default)
        return default

    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %d", name, raw, default)
        return default
    return value


def get_settings() -> Settings:
    """Return the current settings parsed from ``VALGUARD_*`` variables."""

    return Settings(
        repr_maxlevel=_positive_int("VALGUARD_REPR_MAXLEVEL", DEFAULT_REPR_MAXLEVEL),
        repr_maxstring=_positive_int("VALGUARD_REPR_MAXSTRING", DEFAULT_REPR_MAXSTRING),
        message_maxlen=_positive_int("VALGUARD_MESSAGE_MAXLEN", DEFAULT_MESSAGE_MAXLEN),
    )


__all__ = [
    "DEFAULT_MESSAGE_MAXLEN",
    "DEFAULT_REPR_MAXLEVEL",
    "DEFAULT_REPR_MAXSTRING",
    "Settings",
    "get_settings",
]
