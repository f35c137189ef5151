# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in predicates.

Every predicate takes the value to check and returns a boolean; it never
raises for a value it does not understand, it rejects it.

Type-guard duality
------------------
Plain type checks are declared ``-> TypeGuard[T]`` so a static checker
narrows the value after ``if is_string(value):``. At runtime a ``TypeGuard``
function is an ordinary function returning ``bool``; the registry, the
annotations and the enforcement wrapper never look at the return annotation
and treat both forms exactly the same. Keep it that way: no code path may
branch on how a predicate is annotated.

Checks that need configuration take a second ``options`` argument holding a
frozen dataclass (:class:`RangeOptions`, :class:`LengthOptions`, ...) and are
bound to it by :func:`valguard.annotation.annotation_factory`.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Mapping, Sized
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, TypeGuard, Union

from ..exceptions import ConfigurationError

Number = Union[int, float]


def is_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str) and value.strip() != ""


def is_number(value: Any) -> TypeGuard[Number]:
    """Real numbers; ``True``/``False`` are booleans, not numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer(value: Any) -> TypeGuard[int]:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_mapping(value: Any) -> TypeGuard[Mapping]:
    return isinstance(value, Mapping)


# ----------------------------------------------------------------------------
# Option-bound checks
# ----------------------------------------------------------------------------


@dataclass(frozen=True)
class RangeOptions:
    """Inclusive numeric bounds; ``None`` leaves that side open."""

    min: Optional[Number] = None
    max: Optional[Number] = None

    def __post_init__(self):
        for bound in (self.min, self.max):
            if bound is not None and not is_number(bound):
                raise ConfigurationError(f"Range bounds must be numbers, got {bound!r}")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ConfigurationError(f"Range min {self.min} is greater than max {self.max}")


@dataclass(frozen=True)
class LengthOptions:
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    def __post_init__(self):
        for bound in (self.min_length, self.max_length):
            if bound is not None and (not is_integer(bound) or bound < 0):
                raise ConfigurationError(f"Length bounds must be non-negative integers, got {bound!r}")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ConfigurationError(
                f"minLength {self.min_length} is greater than maxLength {self.max_length}"
            )


@dataclass(frozen=True)
class PatternOptions:
    pattern: str
    flags: int = 0
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            compiled = re.compile(self.pattern, self.flags)
        except (re.error, TypeError) as exc:
            raise ConfigurationError(f"Invalid regular expression {self.pattern!r}: {exc}") from exc
        object.__setattr__(self, "compiled", compiled)


@dataclass(frozen=True)
class ChoiceOptions:
    choices: Tuple[Any, ...]

    def __post_init__(self):
        if isinstance(self.choices, (str, bytes)):
            raise ConfigurationError("choices must be a collection of values, not a string")
        object.__setattr__(self, "choices", tuple(self.choices))
        if not self.choices:
            raise ConfigurationError("choices must not be empty")


@dataclass(frozen=True)
class TextOptions:
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise ConfigurationError(f"text must be a string, got {self.text!r}")


def in_range(value: Any, options: RangeOptions) -> bool:
    if not is_number(value):
        return False
    if options.min is not None and not value >= options.min:
        return False
    if options.max is not None and not value <= options.max:
        return False
    return True


def length_between(value: Any, options: LengthOptions) -> bool:
    if not isinstance(value, Sized):
        return False
    length = len(value)
    if options.min_length is not None and length < options.min_length:
        return False
    if options.max_length is not None and length > options.max_length:
        return False
    return True


def matches(value: Any, options: PatternOptions) -> bool:
    return isinstance(value, str) and options.compiled.search(value) is not None


def one_of(value: Any, options: ChoiceOptions) -> bool:
    for choice in options.choices:
        if value is choice:
            return True
        try:
            if value == choice:
                return True
        except Exception:
            # an incomparable value is not one of the choices
            continue
    return False


def starts_with(value: Any, options: TextOptions) -> bool:
    return isinstance(value, str) and value.startswith(options.text)


def ends_with(value: Any, options: TextOptions) -> bool:
    return isinstance(value, str) and value.endswith(options.text)


def contains(value: Any, options: TextOptions) -> bool:
    return isinstance(value, str) and options.text in value


__all__ = [
    "ChoiceOptions",
    "LengthOptions",
    "PatternOptions",
    "RangeOptions",
    "TextOptions",
    "contains",
    "ends_with",
    "in_range",
    "is_boolean",
    "is_integer",
    "is_mapping",
    "is_non_empty_string",
    "is_number",
    "is_string",
    "length_between",
    "matches",
    "one_of",
    "starts_with",
]
