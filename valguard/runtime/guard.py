# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Helper functions used by the enforcement wrapper."""

from __future__ import annotations

import inspect
import logging
import time
from typing import Any, Mapping, Sequence, Tuple

from ..exceptions import ConfigurationError, ValidationError
from ..registry import MetadataRegistry, TargetIdentity, ValidatorEntry
from ..telemetry.metrics import record_guard_metrics, record_rejection
from ..templating import render

logger = logging.getLogger(__name__)


def run_validators(
    identity: TargetIdentity,
    entries: Sequence[ValidatorEntry],
    value: Any,
) -> None:
    """Run *entries* against *value* in order, stopping at the first rejection.

    Raises:
        ValidationError: a predicate returned a falsy result
        ConfigurationError: a predicate raised
    """
    for entry in entries:
        try:
            accepted = bool(entry.predicate(value))
        except Exception as exc:
            logger.error(
                "Validator '%s' on %s raised %s",
                entry.name,
                identity,
                type(exc).__name__,
            )
            raise ConfigurationError(
                f"Validator '{entry.name}' on {identity} raised {type(exc).__name__}; "
                "predicates must return a boolean instead of raising",
                identity=identity,
            ) from exc

        if not accepted:
            message = render(entry.message_template, value)
            logger.debug("Validator '%s' rejected a value for %s", entry.name, identity)
            record_rejection(identity.qualname, entry.name)
            raise ValidationError(
                message,
                identity=identity,
                value=value,
                validator=entry.name,
            )


def collect_checks(
    registry: MetadataRegistry,
    identities: Sequence[TargetIdentity],
) -> Tuple[Tuple[TargetIdentity, Tuple[ValidatorEntry, ...]], ...]:
    """Return ``(identity, entries)`` pairs for identities that have validators."""

    checks = []
    for identity in identities:
        entries = registry.lookup(identity)
        if entries:
            checks.append((identity, entries))
    return tuple(checks)


def bind_arguments(signature: inspect.Signature, args: Sequence[Any], kwargs: Mapping[str, Any]):
    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()
    return bound.arguments


def check_call(
    registry: MetadataRegistry,
    signature: inspect.Signature,
    identities: Sequence[TargetIdentity],
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> None:
    """Validate one call of a guarded function and record its outcome."""

    checks = collect_checks(registry, identities)
    if not checks:
        return

    target = checks[0][0].qualname
    started_at = time.perf_counter()
    try:
        arguments = bind_arguments(signature, args, kwargs)
        for identity, entries in checks:
            run_validators(identity, entries, arguments[identity.parameter_name])
    except ValidationError:
        record_guard_metrics(target, "rejected", started_at)
        raise
    except ConfigurationError:
        record_guard_metrics(target, "error", started_at)
        raise

    record_guard_metrics(target, "accepted", started_at)


__all__ = [
    "bind_arguments",
    "check_call",
    "collect_checks",
    "run_validators",
]
