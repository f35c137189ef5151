# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""valguard - runtime validation for setters, methods and parameters."""

from .annotation import Annotation, BoundPredicate, annotation_factory, make_annotation
from .decorator import enforce
from .exceptions import ConfigurationError, ValguardError, ValidationError
from .registry import (
    MetadataRegistry,
    TargetIdentity,
    TargetKind,
    ValidatorEntry,
    get_registry,
    identity_of,
)
from .templating import MARKER, inspect_value, render

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "BoundPredicate",
    "ConfigurationError",
    "MARKER",
    "MetadataRegistry",
    "TargetIdentity",
    "TargetKind",
    "ValguardError",
    "ValidationError",
    "ValidatorEntry",
    "annotation_factory",
    "enforce",
    "get_registry",
    "identity_of",
    "inspect_value",
    "make_annotation",
    "render",
]
