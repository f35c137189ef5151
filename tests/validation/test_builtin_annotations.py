# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ready-made annotations behave like any user-built annotation."""

from __future__ import annotations

import pytest

from valguard import ConfigurationError, ValidationError, enforce, get_registry
from valguard.registry import identity_of
from valguard.validation import (
    RangeOptions,
    choice,
    length_in_range,
    numeric_value,
    pattern,
    prefixed,
    string_value,
    value_in_range,
)


def test_builtin_annotations_record_into_given_registry(registry):
    @enforce(registry=registry)
    @numeric_value("row_limit", registry=registry)
    @string_value("table", registry=registry)
    def query(table, row_limit):
        return table, row_limit

    assert query("users", 100) == ("users", 100)
    with pytest.raises(ValidationError, match="Expected a string but received 42"):
        query(42, 100)
    with pytest.raises(ValidationError, match="Expected a number but received '100'"):
        query("users", "100")


def test_range_factory_builds_independent_annotations(registry):
    percent = value_in_range(min=0, max=100).using(registry)
    unbounded = value_in_range(RangeOptions()).using(registry)

    @enforce(registry=registry)
    @unbounded("offset")
    @percent("ratio")
    def scale(ratio, offset):
        return ratio + offset

    assert percent.options == RangeOptions(min=0, max=100)
    assert unbounded.options == RangeOptions()
    assert scale(50, -2000) == -1950
    with pytest.raises(ValidationError, match="Value 150 is outside of the allowed range"):
        scale(150, 0)


def test_misconfigured_range_fails_at_factory_time():
    with pytest.raises(ConfigurationError):
        value_in_range(min=5, max=1)


def test_string_constraint_annotations(registry):
    @enforce(registry=registry)
    @length_in_range(min_length=3, max_length=10).using(registry)("path")
    @prefixed(text="/safe/").using(registry)("path")
    @pattern(pattern=r"^[a-z/]+$").using(registry)("path")
    @choice(choices=("read", "write")).using(registry)("mode")
    def open_path(path, mode):
        return path, mode

    assert open_path("/safe/a", "read") == ("/safe/a", "read")
    with pytest.raises(ValidationError, match="does not match the required pattern"):
        open_path("/SAFE/a", "read")
    with pytest.raises(ValidationError, match="does not start with the required prefix"):
        open_path("/tmp/a", "read")
    with pytest.raises(ValidationError, match="outside of the allowed bounds"):
        open_path("/safe/abcdefgh", "read")
    with pytest.raises(ValidationError, match="not one of the allowed choices"):
        open_path("/safe/a", "delete")


def test_builtin_annotations_default_to_the_process_registry():
    class Label:
        def __init__(self):
            self._text = ""

        @property
        def text(self):
            return self._text

        @enforce
        @string_value
        @text.setter
        def text(self, value):
            self._text = value

    label = Label()
    label.text = "ok"

    with pytest.raises(ValidationError, match="Expected a string but received 42"):
        label.text = 42
    assert label.text == "ok"
    assert identity_of(Label.__dict__["text"]) in get_registry()
