# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Tests for turning predicates into annotations.

Annotations only record metadata: they return the decorated target untouched
and leave interception to @enforce.
"""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from valguard import (
    Annotation,
    BoundPredicate,
    ConfigurationError,
    MetadataRegistry,
    TargetKind,
    annotation_factory,
    make_annotation,
)
from valguard.registry import identity_of


def is_positive(value) -> bool:
    return isinstance(value, (int, float)) and value > 0


@dataclass(frozen=True)
class Bounds:
    low: int
    high: int


def within(value, bounds: Bounds) -> bool:
    return bounds.low <= value <= bounds.high


def test_make_annotation_returns_annotation_named_after_predicate():
    annotation = make_annotation(is_positive, "{value} is not positive")

    assert isinstance(annotation, Annotation)
    assert annotation.name == "is_positive"
    assert annotation.predicate is is_positive
    assert annotation.options is None


def test_explicit_name_overrides_predicate_name():
    annotation = make_annotation(lambda v: True, "never", name="always")
    assert annotation.name == "always"


def test_bare_annotation_registers_accessor_and_returns_target(registry):
    positive = make_annotation(is_positive, "{value} is not positive", registry=registry)

    def set_amount(self, value):
        return value

    decorated = positive(set_amount)

    assert decorated is set_amount
    [entry] = registry.lookup(identity_of(set_amount))
    assert entry.predicate is is_positive
    assert entry.message_template == "{value} is not positive"
    assert entry.parameter_index is None
    assert entry.name == "is_positive"


def test_empty_call_also_registers_accessor(registry):
    positive = make_annotation(is_positive, "{value} is not positive")

    @positive(registry=registry)
    def set_amount(self, value):
        return value

    assert len(registry.lookup(identity_of(set_amount))) == 1


def test_parameter_annotation_records_parameter_index(registry):
    positive = make_annotation(is_positive, "{value} is not positive", registry=registry)

    @positive("amount")
    @positive(2)
    def transfer(self, source, amount):
        return amount

    identity = identity_of(transfer, "amount")
    entries = registry.lookup(identity)

    assert identity.kind is TargetKind.PARAMETER
    assert [e.parameter_index for e in entries] == [2, 2]


def test_annotation_applied_twice_yields_two_entries(registry):
    positive = make_annotation(is_positive, "{value} is not positive", registry=registry)

    @positive
    @positive
    def set_amount(self, value):
        return value

    assert len(registry.lookup(identity_of(set_amount))) == 2


def test_options_are_bound_into_inspectable_predicate():
    annotation = make_annotation(within, "{value} out of bounds", options=Bounds(0, 10))

    assert isinstance(annotation.predicate, BoundPredicate)
    assert annotation.predicate.options == Bounds(0, 10)
    assert annotation.predicate.check is within
    assert annotation.check(5) is True
    assert annotation.check(11) is False


def test_factory_produces_distinct_annotations_per_options():
    bounded = annotation_factory(within, "{value} out of bounds", options_type=Bounds)

    small = bounded(low=0, high=10)
    large = bounded(Bounds(0, 1000))

    assert small is not large
    assert small.options == Bounds(0, 10)
    assert large.options == Bounds(0, 1000)
    assert small.check(500) is False
    assert large.check(500) is True
    assert bounded.__name__ == "within"


def test_factory_without_options_type_requires_options_object():
    bounded = annotation_factory(within, "{value} out of bounds")

    with pytest.raises(ConfigurationError, match="needs an options object"):
        bounded(low=0, high=1)


def test_factory_rejects_unknown_option_fields():
    bounded = annotation_factory(within, "{value} out of bounds", options_type=Bounds)

    with pytest.raises(ConfigurationError, match="Invalid options"):
        bounded(lower=0)


def test_factory_rejects_options_and_fields_together():
    bounded = annotation_factory(within, "{value} out of bounds", options_type=Bounds)

    with pytest.raises(ConfigurationError):
        bounded(Bounds(0, 1), low=2)


def test_non_callable_predicate_is_rejected():
    with pytest.raises(ConfigurationError, match="callable"):
        make_annotation("not a function", "{value}")  # type: ignore[arg-type]


def test_non_string_template_is_rejected():
    with pytest.raises(ConfigurationError, match="string"):
        make_annotation(is_positive, None)  # type: ignore[arg-type]


def test_using_redirects_registration_without_touching_original():
    first, second = MetadataRegistry(), MetadataRegistry()
    positive = make_annotation(is_positive, "{value} is not positive", registry=first)

    @positive.using(second)
    def set_amount(self, value):
        return value

    identity = identity_of(set_amount)
    assert len(second.lookup(identity)) == 1
    assert first.lookup(identity) == ()
    assert positive.using(second).name == positive.name


def test_unknown_parameter_fails_at_decoration_time(registry):
    positive = make_annotation(is_positive, "{value} is not positive", registry=registry)

    with pytest.raises(ConfigurationError, match="no parameter named 'amout'"):

        @positive("amout")
        def transfer(self, amount):
            return amount


def test_factory_rejects_options_of_the_wrong_type():
    bounded = annotation_factory(within, "{value} out of bounds", options_type=Bounds)

    with pytest.raises(ConfigurationError, match="expects Bounds options"):
        bounded("0..10")
