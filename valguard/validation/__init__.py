"""Validation package - built-in predicates and ready-made annotations.

The predicates are plain functions; the core treats them like any other
user supplied predicate.
"""

from .annotations import (
    boolean_value,
    choice,
    containing,
    integer_value,
    length_in_range,
    mapping_value,
    non_empty_string,
    numeric_value,
    pattern,
    prefixed,
    string_value,
    suffixed,
    value_in_range,
)
from .predicates import (
    ChoiceOptions,
    LengthOptions,
    PatternOptions,
    RangeOptions,
    TextOptions,
    contains,
    ends_with,
    in_range,
    is_boolean,
    is_integer,
    is_mapping,
    is_non_empty_string,
    is_number,
    is_string,
    length_between,
    matches,
    one_of,
    starts_with,
)

__all__ = [
    "ChoiceOptions",
    "LengthOptions",
    "PatternOptions",
    "RangeOptions",
    "TextOptions",
    "boolean_value",
    "choice",
    "contains",
    "containing",
    "ends_with",
    "in_range",
    "integer_value",
    "is_boolean",
    "is_integer",
    "is_mapping",
    "is_non_empty_string",
    "is_number",
    "is_string",
    "length_between",
    "length_in_range",
    "mapping_value",
    "matches",
    "non_empty_string",
    "numeric_value",
    "one_of",
    "pattern",
    "prefixed",
    "starts_with",
    "string_value",
    "suffixed",
    "value_in_range",
]
