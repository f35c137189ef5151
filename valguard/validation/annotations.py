# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ready-made annotations over the built-in predicates.

All of them record into the default registry; call ``.using(registry)`` on an
annotation to record somewhere else.
"""

from __future__ import annotations

from ..annotation import annotation_factory, make_annotation
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

string_value = make_annotation(is_string, "Expected a string but received {value}")
non_empty_string = make_annotation(is_non_empty_string, "Expected a non-empty string but received {value}")
numeric_value = make_annotation(is_number, "Expected a number but received {value}")
integer_value = make_annotation(is_integer, "Expected an integer but received {value}")
boolean_value = make_annotation(is_boolean, "Expected a boolean but received {value}")
mapping_value = make_annotation(is_mapping, "Expected a mapping but received {value}")

value_in_range = annotation_factory(
    in_range,
    "Value {value} is outside of the allowed range",
    options_type=RangeOptions,
    name="in_range",
)
length_in_range = annotation_factory(
    length_between,
    "Length of {value} is outside of the allowed bounds",
    options_type=LengthOptions,
    name="length_between",
)
pattern = annotation_factory(
    matches,
    "Value {value} does not match the required pattern",
    options_type=PatternOptions,
    name="matches",
)
choice = annotation_factory(
    one_of,
    "Value {value} is not one of the allowed choices",
    options_type=ChoiceOptions,
    name="one_of",
)
prefixed = annotation_factory(
    starts_with,
    "Value {value} does not start with the required prefix",
    options_type=TextOptions,
    name="starts_with",
)
suffixed = annotation_factory(
    ends_with,
    "Value {value} does not end with the required suffix",
    options_type=TextOptions,
    name="ends_with",
)
containing = annotation_factory(
    contains,
    "Value {value} does not contain the required text",
    options_type=TextOptions,
    name="contains",
)

__all__ = [
    "boolean_value",
    "choice",
    "containing",
    "integer_value",
    "length_in_range",
    "mapping_value",
    "non_empty_string",
    "numeric_value",
    "pattern",
    "prefixed",
    "string_value",
    "suffixed",
    "value_in_range",
]
