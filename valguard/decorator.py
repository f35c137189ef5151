# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# valguard/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from .exceptions import ConfigurationError
from .registry import (
    WRAPPED_ATTR,
    MetadataRegistry,
    candidate_identities,
    get_registry,
    signature_of,
)
from .runtime import check_call

logger = logging.getLogger(__name__)


def enforce(
    target: Optional[Any] = None,
    *,
    registry: Optional[MetadataRegistry] = None,
):
    """
    The enforcement decorator.

    Wraps a setter, method or function so that every call first runs the
    validators that annotations registered for it, in registration order,
    and raises :class:`~valguard.exceptions.ValidationError` on the first
    rejection. The wrapped body only runs when every validator accepts, and
    it receives the original arguments untouched.

    :param target: The member to guard. Supplied implicitly when used as
                   ``@enforce`` without parentheses.
    :param registry: Optional. The registry to read validators from.
                     Defaults to the process-wide registry.

    **Supported members:**

    .. code-block:: python

        from valguard import enforce
        from valguard.validation import numeric_value, string_value

        class Vehicle:
            @property
            def name(self):
                return self._name

            # Option 1: a property - the setter's value is checked
            @enforce
            @string_value
            @name.setter
            def name(self, value):
                self._name = value

            # Option 2: a method - individual parameters are checked
            @enforce
            @numeric_value("speed")
            def accelerate(self, speed):
                ...

            # Option 3: coroutine functions are checked before they run
            @enforce
            @numeric_value("speed")
            async def cruise(self, speed):
                ...

    Enforcing an already enforced member returns it unchanged, so there is
    never more than one wrapper per member.
    """

    def decorator(member: Any):
        if isinstance(member, property):
            if member.fset is None:
                raise ConfigurationError(
                    f"Property {getattr(member.fget, '__qualname__', member)!r} has no setter to enforce"
                )
            return property(member.fget, decorator(member.fset), member.fdel, member.__doc__)

        if isinstance(member, staticmethod):
            return staticmethod(decorator(member.__func__))
        if isinstance(member, classmethod):
            return classmethod(decorator(member.__func__))

        if hasattr(member, WRAPPED_ATTR):
            logger.debug("%s is already enforced", getattr(member, "__qualname__", member))
            return member

        if not callable(member):
            raise ConfigurationError(f"Cannot enforce non-callable member {member!r}")

        func: Callable = member
        effective_registry = registry or get_registry()
        signature = signature_of(func)
        identities = candidate_identities(func)
        sealed = False

        def _check(args, kwargs):
            nonlocal sealed
            if not sealed:
                # first call closes the registration phase for this member
                effective_registry.seal(identities)
                sealed = True
            check_call(effective_registry, signature, identities, args, kwargs)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""
            _check(args, kwargs)
            return func(*args, **kwargs)

        @functools.wraps(func)
        def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions.

            Checks run when the coroutine function is called, so a rejected
            call raises before any coroutine exists and later mutation of
            the arguments cannot slip past validation.
            """
            _check(args, kwargs)
            return func(*args, **kwargs)

        # Choose the appropriate wrapper based on whether the decorated function is sync or async
        if inspect.iscoroutinefunction(func):
            wrapper = inspect.markcoroutinefunction(async_wrapper)
        else:
            wrapper = sync_wrapper

        # Point back at the original so annotations applied above us resolve to it
        setattr(wrapper, WRAPPED_ATTR, func)
        wrapper.__valguard_registry__ = effective_registry
        return wrapper

    # Dual syntax (@enforce vs @enforce(...))
    if target is not None:
        return decorator(target)
    return decorator


__all__ = ["enforce"]
