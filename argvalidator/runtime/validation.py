# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide validator and module-level helpers."""

from __future__ import annotations

from typing import Any, Final, Optional

from ..exceptions import ArgValidatorError, ParameterError, describe_argument, safe_repr
from ..validation import ConstraintRegistry, Validator
from ..validation.constraints import Checker


_REGISTRY: Final[ConstraintRegistry] = ConstraintRegistry.with_builtins()
_VALIDATOR: Final[Validator] = Validator(registry=_REGISTRY)


def get_validator() -> Validator:
    """Return the process-wide validator instance."""

    return _VALIDATOR


def get_registry() -> ConstraintRegistry:
    """Return the constraint registry used by :func:`validate`."""

    return _REGISTRY


def validate(values: Any, specs: Any) -> dict:
    """Validate *values* against *specs* with the process-wide validator."""

    return _VALIDATOR.validate(values, specs)


def register_constraint(name: str, checker: Optional[Checker] = None, *, replace: bool = False):
    """Register a constraint checker on the process-wide registry.

    Usable directly or as a decorator:

    .. code-block:: python

        @register_constraint("max")
        def check_max(param, value, limit):
            if value > limit:
                raise ConstraintViolation(param, value, "max", limit)
    """

    return _REGISTRY.register(name, checker, replace=replace)


def format_failure(error: ArgValidatorError) -> str:
    """Produce a human-readable, multi-line description of a validation failure."""

    param = getattr(error, "param", None)
    header = "Argument validation failed"
    if param is not None:
        header += f" for parameter '{param}'"
    lines = [f"{header}:", f" - {error.message}"]
    if isinstance(error, ParameterError):
        if error.constraint is not None:
            lines.append(f" - constraint: {error.constraint} ({describe_argument(error.argument)})")
        if error.constraint != "required":
            lines.append(f" - value: {safe_repr(error.value)}")
    return "\n".join(lines)


__all__ = [
    "format_failure",
    "get_registry",
    "get_validator",
    "register_constraint",
    "validate",
]
