# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared data-model helpers: control keys and input normalization.

Both the value set and the spec set accepted by ``validate`` come in several
shapes (named mapping, positional sequence, scalar/single-spec shorthand).
The functions here fold all of them into plain ``dict`` objects keyed by the
same domain: parameter names in named mode, 0-based indices in positional mode.
"""

from __future__ import annotations

import builtins
import importlib
import logging
from typing import Any, Dict, Hashable, Mapping, Sequence, Tuple

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_KEY = "required"
DEFAULT_KEY = "default"
BUILDER_KEY = "builder"

# Spec keys consumed by resolution; everything else names a constraint.
CONTROL_KEYS = frozenset({REQUIRED_KEY, DEFAULT_KEY, BUILDER_KEY})

ValueSet = Dict[Hashable, Any]
SpecSet = Dict[Hashable, Mapping[str, Any]]


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def normalize_values(values: Any) -> ValueSet:
    """Return a fresh ``dict`` view of *values*.

    Scalars become ``{0: value}``, sequences become ``{index: value}`` and
    mappings are shallow-copied so resolution never mutates the caller's data.
    """

    if isinstance(values, Mapping):
        return dict(values)
    if is_sequence(values):
        return dict(enumerate(values))
    return {0: values}


def normalize_specs(specs: Any) -> SpecSet:
    """Return *specs* as a ``dict`` of parameter key -> ParameterSpec.

    A mapping whose first value is itself a mapping is a keyed spec set;
    any other mapping is a single ParameterSpec for the sole (index ``0``)
    value. A sequence is a positional spec set.
    """

    if specs is None:
        return {}
    if isinstance(specs, Mapping):
        if not specs:
            return {}
        first = next(iter(specs.values()))
        if isinstance(first, Mapping):
            return dict(specs)
        return {0: specs}
    if is_sequence(specs):
        return dict(enumerate(specs))
    raise ConfigurationError(
        f"specs must be a mapping or a sequence of mappings, got {type(specs).__name__}"
    )


def normalize(values: Any, specs: Any) -> Tuple[ValueSet, SpecSet]:
    """Key-align *values* and *specs* (see :func:`normalize_values`/:func:`normalize_specs`)."""

    return normalize_values(values), normalize_specs(specs)


def resolve_reference(reference: str) -> Any:
    """Import and return the object named by *reference*.

    Accepts ``"package.module:attr.path"`` or ``"package.module.attr"``.
    Raises :class:`ImportError` or :class:`AttributeError` when the name
    cannot be resolved.
    """

    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
        target = importlib.import_module(module_name)
        for part in attr_path.split("."):
            target = getattr(target, part)
        return target

    if "." not in reference:
        if hasattr(builtins, reference):
            return getattr(builtins, reference)
        raise ImportError(f"'{reference}' is not a dotted path")

    # Walk back until an importable module prefix is found ("pkg.mod.Class.method").
    parts = reference.split(".")
    for split in range(len(parts) - 1, 0, -1):
        try:
            target = importlib.import_module(".".join(parts[:split]))
        except (ImportError, ValueError):
            continue
        for part in parts[split:]:
            target = getattr(target, part)
        logger.debug("Resolved reference '%s' via module '%s'", reference, ".".join(parts[:split]))
        return target
    raise ImportError(f"No importable module in '{reference}'")


__all__ = [
    "BUILDER_KEY",
    "CONTROL_KEYS",
    "DEFAULT_KEY",
    "REQUIRED_KEY",
    "SpecSet",
    "ValueSet",
    "is_sequence",
    "normalize",
    "normalize_specs",
    "normalize_values",
    "resolve_reference",
]
