# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for argvalidator.

Two families exist:

* :class:`ParameterError` – the *values* handed to ``validate`` do not satisfy
  the parameter specs (missing parameter, failed constraint). These subclass
  :class:`ValueError` so call sites that already expect bad-argument errors keep
  working.
* :class:`ConfigurationError` – the *parameter specs themselves* are malformed
  (unknown constraint name, unusable builder, bad constraint argument).

Every error carries the parameter name and, where applicable, the offending
value and the violated constraint so the failure can be diagnosed far away from
the call site.
"""

from __future__ import annotations

from typing import Any, Optional

from .config import get_repr_limit


def safe_repr(value: Any, limit: Optional[int] = None) -> str:
    """Return a bounded ``repr`` of *value* that never raises."""

    if limit is None:
        limit = get_repr_limit()
    try:
        text = repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text


def describe_argument(argument: Any) -> str:
    """Render a constraint argument (type, pattern, literal) for messages."""

    if isinstance(argument, type):
        return f"{argument.__module__}.{argument.__qualname__}"
    if isinstance(argument, tuple) and argument and all(isinstance(a, type) for a in argument):
        return " | ".join(describe_argument(a) for a in argument)
    pattern = getattr(argument, "pattern", None)
    if isinstance(pattern, str):
        return pattern
    if isinstance(argument, str):
        return argument
    return safe_repr(argument)


class ArgValidatorError(Exception):
    """Base class for every error raised by argvalidator."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParameterError(ArgValidatorError, ValueError):
    """A supplied value set does not satisfy its parameter specs."""

    code = "invalid_parameter"

    def __init__(
        self,
        message: str,
        *,
        param: Any,
        value: Any = None,
        constraint: Optional[str] = None,
        argument: Any = None,
    ):
        self.param = param
        self.value = value
        self.constraint = constraint
        self.argument = argument
        super().__init__(message)


class MissingRequiredParameter(ParameterError):
    """No value, not optional, and neither ``default`` nor ``builder`` given."""

    code = "missing_required"

    def __init__(self, param: Any):
        super().__init__(
            f"Missing argument for required parameter '{param}'",
            param=param,
            constraint="required",
            argument=True,
        )


class ConstraintViolation(ParameterError):
    """A resolved value failed a named constraint check.

    Custom checkers registered through the constraint registry should raise
    this (or a subclass) so the failure keeps the parameter/value/constraint
    chain intact.
    """

    code = "constraint"

    def __init__(
        self,
        param: Any,
        value: Any,
        constraint: str,
        argument: Any,
        message: Optional[str] = None,
    ):
        if message is None:
            message = (
                f"The argument {safe_repr(value)} for parameter '{param}' "
                f"failed constraint '{constraint}' ({describe_argument(argument)})"
            )
        super().__init__(
            message,
            param=param,
            value=value,
            constraint=constraint,
            argument=argument,
        )


class TypeMismatch(ConstraintViolation, TypeError):
    code = "type_mismatch"

    def __init__(self, param: Any, value: Any, expected_type: str):
        self.expected_type = expected_type
        super().__init__(
            param,
            value,
            "is",
            expected_type,
            message=(
                f"The argument {safe_repr(value)} for parameter '{param}' "
                f"is not of type '{expected_type}'"
            ),
        )


class PatternMismatch(ConstraintViolation):
    code = "pattern_mismatch"

    def __init__(self, param: Any, value: Any, pattern: Any):
        self.pattern = pattern
        super().__init__(
            param,
            value,
            "regex",
            pattern,
            message=(
                f"The argument {safe_repr(value)} for parameter '{param}' "
                f"failed to match regex '{describe_argument(pattern)}'"
            ),
        )


class InstanceofMismatch(ConstraintViolation, TypeError):
    code = "instanceof_mismatch"

    def __init__(self, param: Any, value: Any, expected_type: Any):
        self.expected_type = expected_type
        super().__init__(
            param,
            value,
            "instanceof",
            expected_type,
            message=(
                f"The argument {safe_repr(value)} for parameter '{param}' "
                f"is not an instance of '{describe_argument(expected_type)}'"
            ),
        )


class ConfigurationError(ArgValidatorError):
    """The parameter specs handed to ``validate`` are malformed."""

    code = "configuration"

    def __init__(self, message: str, *, param: Any = None):
        self.param = param
        super().__init__(message)


class InvalidBuilderSpec(ConfigurationError):
    code = "invalid_builder"

    def __init__(self, param: Any, builder: Any = None):
        self.builder = builder
        super().__init__(
            f"No callable found in 'builder' spec for parameter '{param}': {safe_repr(builder)}",
            param=param,
        )


class UnknownConstraint(ConfigurationError):
    code = "unknown_constraint"

    def __init__(self, param: Any, constraint: str):
        self.constraint = constraint
        super().__init__(
            f"Unknown constraint '{constraint}' in spec for parameter '{param}'",
            param=param,
        )


class InvalidConstraintArgument(ConfigurationError):
    code = "invalid_constraint_argument"

    def __init__(self, param: Any, constraint: str, argument: Any, reason: str):
        self.constraint = constraint
        self.argument = argument
        self.reason = reason
        super().__init__(
            f"Invalid argument {safe_repr(argument)} for constraint '{constraint}' "
            f"on parameter '{param}': {reason}",
            param=param,
        )


__all__ = [
    "ArgValidatorError",
    "ConfigurationError",
    "ConstraintViolation",
    "InstanceofMismatch",
    "InvalidBuilderSpec",
    "InvalidConstraintArgument",
    "MissingRequiredParameter",
    "ParameterError",
    "PatternMismatch",
    "TypeMismatch",
    "UnknownConstraint",
    "describe_argument",
    "safe_repr",
]
