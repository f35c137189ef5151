# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for valguard."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .registry import TargetIdentity


class ValguardError(Exception):
    """Base class for every error raised by valguard."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ValguardError, ValueError):
    """Raised when a registered validator rejects an incoming value.

    :param message: The rendered failure message.
    :param identity: The target (accessor or parameter) that rejected the value.
    :param value: The rejected value, passed through untouched.
    :param validator: Name of the validator entry that failed.
    """

    def __init__(
        self,
        message: str,
        *,
        identity: Optional["TargetIdentity"] = None,
        value: Any = None,
        validator: Optional[str] = None,
    ):
        super().__init__(message)
        self.identity = identity
        self.value = value
        self.validator = validator

    def __repr__(self) -> str:
        return (
            f"ValidationError(message={self.message!r}, "
            f"target={str(self.identity) if self.identity else None!r}, "
            f"validator={self.validator!r})"
        )


class ConfigurationError(ValguardError):
    """Raised for validator authoring mistakes.

    A predicate that raises, a parameter reference that does not exist or a
    registration after enforcement started are programming errors, not bad
    input, and are never retried.
    """

    def __init__(self, message: str, *, identity: Optional["TargetIdentity"] = None):
        super().__init__(message)
        self.identity = identity


__all__ = [
    "ConfigurationError",
    "ValguardError",
    "ValidationError",
]
