# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metadata registry mapping guarded targets to their validators.

Annotations write to the registry while modules and classes are being
defined; :func:`valguard.enforce` wrappers only read from it afterwards.
Once a wrapper has started enforcing a target, further registrations on that
target are rejected so the set of validators seen by a call never changes
underneath it.
"""

from __future__ import annotations

import enum
import inspect
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Final, Iterable, Optional, Set, Tuple, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]
ParameterRef = Union[str, int]

# Attribute set on enforcement wrappers, pointing back at the original function.
WRAPPED_ATTR: Final[str] = "__valguard_wrapped__"

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_RECEIVER_NAMES = ("self", "cls")


class TargetKind(str, enum.Enum):
    """What part of a member a validator is attached to."""

    ACCESSOR = "accessor"
    PARAMETER = "parameter"


@dataclass(frozen=True)
class TargetIdentity:
    """Stable key for one accessor or parameter of one function object.

    Functions compare and hash by identity, so two classes that happen to
    share a qualified name never share validators.
    """

    function: Callable[..., Any]
    kind: TargetKind
    parameter_index: int
    parameter_name: str = field(default="", compare=False)

    @property
    def qualname(self) -> str:
        module = getattr(self.function, "__module__", None)
        name = getattr(self.function, "__qualname__", None) or repr(self.function)
        return f"{module}.{name}" if module else name

    def __str__(self) -> str:
        return f"{self.qualname}[{self.kind.value}:{self.parameter_name}]"


@dataclass(frozen=True)
class ValidatorEntry:
    """One validator attached to a target."""

    predicate: Predicate
    message_template: str
    parameter_index: Optional[int] = None
    name: str = ""


class MetadataRegistry:
    """Ordered store of :class:`ValidatorEntry` per :class:`TargetIdentity`.

    Entry lists are kept as tuples and replaced on every registration, so
    :meth:`lookup` hands out the stored tuple without copying and readers on
    other threads always see a complete list.
    """

    def __init__(self) -> None:
        self._entries: Dict[TargetIdentity, Tuple[ValidatorEntry, ...]] = {}
        self._sealed: Set[TargetIdentity] = set()
        self._lock = threading.Lock()

    def register(self, identity: TargetIdentity, entry: ValidatorEntry) -> None:
        """Append *entry* to the validators of *identity*."""

        with self._lock:
            if identity in self._sealed:
                logger.error(
                    "Validator '%s' registered on %s after enforcement started",
                    entry.name,
                    identity,
                )
                raise ConfigurationError(
                    f"Cannot register validator '{entry.name}' on {identity}: "
                    "the target is already being enforced",
                    identity=identity,
                )
            self._entries[identity] = self._entries.get(identity, ()) + (entry,)

        logger.debug("Registered validator '%s' on %s", entry.name, identity)

    def lookup(self, identity: TargetIdentity) -> Tuple[ValidatorEntry, ...]:
        """Return the validators of *identity* in registration order."""

        return self._entries.get(identity, ())

    def seal(self, identities: Iterable[TargetIdentity]) -> None:
        """Mark *identities* as enforced; later registrations will fail."""

        with self._lock:
            self._sealed.update(identities)

    def identities(self) -> Tuple[TargetIdentity, ...]:
        return tuple(identity for identity, entries in self._entries.items() if entries)

    def __contains__(self, identity: object) -> bool:
        return bool(self._entries.get(identity, ()))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.identities())


_REGISTRY: Final[MetadataRegistry] = MetadataRegistry()


def get_registry() -> MetadataRegistry:
    """Return the process-wide default registry."""

    return _REGISTRY


# ----------------------------------------------------------------------------
# Identity resolution
# ----------------------------------------------------------------------------


def resolve_function(target: Any) -> Callable[..., Any]:
    """Return the plain function behind *target*.

    Properties resolve to their setter, static and class methods to the
    underlying function and enforcement wrappers to the function they wrap.
    """

    if isinstance(target, property):
        if target.fset is None:
            raise ConfigurationError(
                f"Property {getattr(target.fget, '__qualname__', target)!r} has no setter to guard"
            )
        target = target.fset

    if isinstance(target, (staticmethod, classmethod)):
        target = target.__func__

    target = getattr(target, WRAPPED_ATTR, target)

    if not callable(target):
        raise ConfigurationError(f"Cannot guard non-callable target {target!r}")

    try:
        hash(target)
    except TypeError:
        raise ConfigurationError(f"Cannot guard unhashable target {target!r}") from None

    return target


def signature_of(function: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(function)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Cannot inspect signature of {function!r}: {exc}") from exc


def _accessor_value_parameter(parameters) -> Optional[inspect.Parameter]:
    # (value), (self, value) or (cls, value)
    positional = [p for p in parameters if p.kind in _POSITIONAL]
    if len(positional) == 1 and positional[0].name not in _RECEIVER_NAMES:
        return positional[0]
    if len(positional) == 2 and positional[0].name in _RECEIVER_NAMES:
        return positional[1]
    return None


def _accessor_identity(function: Callable[..., Any], parameters) -> TargetIdentity:
    value_param = _accessor_value_parameter(parameters)
    if value_param is None:
        qualname = getattr(function, "__qualname__", repr(function))
        raise ConfigurationError(
            f"Accessor '{qualname}' must take exactly one value argument "
            "(optionally after the instance)"
        )
    return TargetIdentity(
        function=function,
        kind=TargetKind.ACCESSOR,
        parameter_index=parameters.index(value_param),
        parameter_name=value_param.name,
    )


def identity_of(target: Any, parameter: Optional[ParameterRef] = None) -> TargetIdentity:
    """Resolve the identity of *target*, or of one of its parameters.

    :param target: function, property, static/class method or enforced wrapper.
    :param parameter: ``None`` for the accessor value, otherwise a parameter
                      name or its position in the signature.
    """

    function = resolve_function(target)
    parameters = list(signature_of(function).parameters.values())
    qualname = getattr(function, "__qualname__", repr(function))

    if parameter is None:
        return _accessor_identity(function, parameters)

    if isinstance(parameter, bool) or not isinstance(parameter, (str, int)):
        raise ConfigurationError(
            f"Parameter reference for '{qualname}' must be a name or an index, got {parameter!r}"
        )

    if isinstance(parameter, str):
        names = [p.name for p in parameters]
        if parameter not in names:
            logger.error("Validator references unknown parameter '%s' of '%s'", parameter, qualname)
            raise ConfigurationError(
                f"'{qualname}' has no parameter named '{parameter}' (available: {names})"
            )
        index = names.index(parameter)
    else:
        if not 0 <= parameter < len(parameters):
            logger.error("Validator references parameter index %d of '%s'", parameter, qualname)
            raise ConfigurationError(
                f"Parameter index {parameter} is out of range for '{qualname}' "
                f"({len(parameters)} parameter(s))"
            )
        index = parameter

    param = parameters[index]
    if param.kind in _VARIADIC:
        raise ConfigurationError(
            f"Cannot guard variadic parameter '{param.name}' of '{qualname}'"
        )

    return TargetIdentity(
        function=function,
        kind=TargetKind.PARAMETER,
        parameter_index=index,
        parameter_name=param.name,
    )


def candidate_identities(target: Any) -> Tuple[TargetIdentity, ...]:
    """Every identity an enforcement wrapper for *target* has to consult.

    The accessor identity (when the signature has one) comes first, then one
    identity per non-variadic parameter in declaration order.
    """

    function = resolve_function(target)
    parameters = list(signature_of(function).parameters.values())

    identities = []
    if _accessor_value_parameter(parameters) is not None:
        identities.append(_accessor_identity(function, parameters))

    for index, param in enumerate(parameters):
        if param.kind in _VARIADIC:
            continue
        identities.append(
            TargetIdentity(
                function=function,
                kind=TargetKind.PARAMETER,
                parameter_index=index,
                parameter_name=param.name,
            )
        )
    return tuple(identities)


__all__ = [
    "MetadataRegistry",
    "ParameterRef",
    "Predicate",
    "TargetIdentity",
    "TargetKind",
    "ValidatorEntry",
    "WRAPPED_ATTR",
    "candidate_identities",
    "get_registry",
    "identity_of",
    "resolve_function",
    "signature_of",
]
