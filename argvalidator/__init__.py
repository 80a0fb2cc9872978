# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""argvalidator - declarative argument validation.

.. code-block:: python

    from argvalidator import validate

    validate(
        {"foo": 1},
        {"foo": {"is": "int"}, "bar": {"is": "string", "default": "baz"}},
    )
    # -> {"foo": 1, "bar": "baz"}
"""

from .exceptions import (
    ArgValidatorError,
    ConfigurationError,
    ConstraintViolation,
    InstanceofMismatch,
    InvalidBuilderSpec,
    InvalidConstraintArgument,
    MissingRequiredParameter,
    ParameterError,
    PatternMismatch,
    TypeMismatch,
    UnknownConstraint,
)
from .runtime import (
    format_failure,
    get_registry,
    get_validator,
    register_constraint,
    validate,
)
from .validation import (
    CallableProducer,
    ConstraintRegistry,
    MethodProducer,
    Validator,
    ValueProducer,
    register_type,
)

__version__ = "0.1.0"

__all__ = [
    "ArgValidatorError",
    "CallableProducer",
    "ConfigurationError",
    "ConstraintRegistry",
    "ConstraintViolation",
    "InstanceofMismatch",
    "InvalidBuilderSpec",
    "InvalidConstraintArgument",
    "MethodProducer",
    "MissingRequiredParameter",
    "ParameterError",
    "PatternMismatch",
    "TypeMismatch",
    "UnknownConstraint",
    "Validator",
    "ValueProducer",
    "format_failure",
    "get_registry",
    "get_validator",
    "register_constraint",
    "register_type",
    "validate",
]
