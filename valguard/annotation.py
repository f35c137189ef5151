# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Turn predicates into reusable validation annotations.

An annotation is a decorator that only records metadata: applying it
registers a :class:`~valguard.registry.ValidatorEntry` for the decorated
target and hands the target back unchanged. Interception is the job of
:func:`valguard.enforce`, so any number of annotations from different authors
can be stacked on one member while a single wrapper does the checking.

.. code-block:: python

    from valguard import enforce, make_annotation

    positive = make_annotation(lambda v: v > 0, "Expected a positive number, got {value}")

    class Account:
        @enforce
        @positive("amount")
        def deposit(self, amount): ...

Stacked decorators are evaluated bottom-up, so the annotation nearest to the
``def`` is registered, and later checked, first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import ConfigurationError
from .registry import (
    MetadataRegistry,
    ParameterRef,
    Predicate,
    TargetKind,
    ValidatorEntry,
    get_registry,
    identity_of,
)


def _is_target(obj: Any) -> bool:
    return isinstance(obj, (property, staticmethod, classmethod)) or callable(obj)


@dataclass(frozen=True)
class BoundPredicate:
    """A two-argument check paired with the options it was configured with.

    Calling it with a value runs ``check(value, options)``; ``options`` stays
    inspectable instead of hiding inside a closure.
    """

    check: Callable[[Any, Any], bool]
    options: Any

    def __call__(self, value: Any) -> bool:
        return self.check(value, self.options)


class Annotation:
    """A reusable validator that registers itself on decorated targets.

    ``@annotation`` guards the value argument of a setter; ``@annotation("x")``
    or ``@annotation(1)`` guards one parameter by name or position. Pass
    ``registry=`` to record into something other than the default registry.
    """

    def __init__(
        self,
        predicate: Callable[..., bool],
        message_template: str,
        *,
        name: Optional[str] = None,
        options: Any = None,
        registry: Optional[MetadataRegistry] = None,
    ):
        if not callable(predicate):
            raise ConfigurationError(f"Validator predicate must be callable, got {predicate!r}")
        if not isinstance(message_template, str):
            raise ConfigurationError(
                f"Message template must be a string, got {type(message_template).__name__}"
            )

        bound: Predicate = predicate if options is None else BoundPredicate(predicate, options)
        self.predicate = bound
        self.message_template = message_template
        self.options = options
        self.name = name or getattr(predicate, "__name__", type(predicate).__name__)
        self._registry = registry

    def __repr__(self) -> str:
        return f"Annotation(name={self.name!r}, options={self.options!r})"

    def using(self, registry: MetadataRegistry) -> "Annotation":
        """Return a copy of this annotation that records into *registry*."""

        clone = Annotation.__new__(Annotation)
        clone.__dict__.update(self.__dict__)
        clone._registry = registry
        return clone

    def check(self, value: Any) -> bool:
        """Run the predicate directly, outside of any enforcement wrapper."""

        return bool(self.predicate(value))

    def apply(
        self,
        target: Any,
        parameter: Optional[ParameterRef] = None,
        *,
        registry: Optional[MetadataRegistry] = None,
    ) -> Any:
        """Register this validator on *target* and return *target* unchanged."""

        identity = identity_of(target, parameter)
        entry = ValidatorEntry(
            predicate=self.predicate,
            message_template=self.message_template,
            parameter_index=identity.parameter_index if identity.kind is TargetKind.PARAMETER else None,
            name=self.name,
        )
        (registry or self._registry or get_registry()).register(identity, entry)
        return target

    def __call__(self, target: Any = None, *, registry: Optional[MetadataRegistry] = None):
        # @annotation applied directly to a function/property
        if target is not None and _is_target(target):
            return self.apply(target, registry=registry)

        # @annotation(), @annotation("param") or @annotation(index)
        parameter = target

        def decorator(member: Any) -> Any:
            return self.apply(member, parameter, registry=registry)

        return decorator


def make_annotation(
    predicate: Callable[..., bool],
    message_template: str,
    *,
    name: Optional[str] = None,
    options: Any = None,
    registry: Optional[MetadataRegistry] = None,
) -> Annotation:
    """Build an :class:`Annotation` from a predicate and a message template.

    :param predicate: ``predicate(value) -> bool``, or ``predicate(value, options)``
                      when *options* is given.
    :param message_template: failure message; ``{value}`` is replaced with the
                             rejected value.
    :param name: diagnostic name, defaults to the predicate's ``__name__``.
    :param options: configuration captured for this annotation, e.g. range bounds.
    :param registry: registry to record into, defaults to :func:`get_registry`.
    """

    return Annotation(
        predicate,
        message_template,
        name=name,
        options=options,
        registry=registry,
    )


def annotation_factory(
    check: Callable[[Any, Any], bool],
    message_template: str,
    *,
    options_type: Optional[Callable[..., Any]] = None,
    name: Optional[str] = None,
    registry: Optional[MetadataRegistry] = None,
) -> Callable[..., Annotation]:
    """Return a factory producing one annotation per set of options.

    ``factory(options)`` uses *options* as given; ``factory(**fields)`` builds
    them with *options_type*. Each call returns a distinct annotation.
    """

    def factory(options: Any = None, **fields: Any) -> Annotation:
        if options is None:
            if options_type is None:
                raise ConfigurationError(
                    f"Annotation factory '{name or check.__name__}' needs an options object"
                )
            try:
                options = options_type(**fields)
            except TypeError as exc:
                raise ConfigurationError(
                    f"Invalid options for '{name or check.__name__}': {exc}"
                ) from exc
        elif fields:
            raise ConfigurationError("Pass either an options object or keyword fields, not both")
        elif isinstance(options_type, type) and not isinstance(options, options_type):
            raise ConfigurationError(
                f"Annotation factory '{name or check.__name__}' expects {options_type.__name__} "
                f"options, got {type(options).__name__}"
            )

        return Annotation(
            check,
            message_template,
            name=name,
            options=options,
            registry=registry,
        )

    factory.__name__ = name or getattr(check, "__name__", "annotation_factory")
    return factory


__all__ = [
    "Annotation",
    "BoundPredicate",
    "annotation_factory",
    "make_annotation",
]
