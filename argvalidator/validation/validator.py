# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validator - resolve missing parameters, then check declared constraints.

Pipeline for one ``validate`` call:

1. normalize values and specs into key-aligned dicts
2. for each spec (in spec order) resolve a missing value with the fixed
   precedence *explicit value > optional-and-absent > default > builder*,
   or fail with :class:`MissingRequiredParameter`
3. run every non-control spec key as a constraint against the resolved value
4. return the resolved dict

The first failure aborts the call; nothing is accumulated.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Hashable, Mapping, Optional

from ..exceptions import (
    ArgValidatorError,
    ConfigurationError,
    MissingRequiredParameter,
    UnknownConstraint,
)
from ..telemetry import builder_invocation_total, get_tracer, record_validation
from .base import (
    BUILDER_KEY,
    CONTROL_KEYS,
    DEFAULT_KEY,
    REQUIRED_KEY,
    ValueSet,
    normalize,
)
from .builders import decode_builder
from .constraints import ConstraintRegistry

logger = logging.getLogger(__name__)

_MISSING = object()


class Validator:
    """Declarative argument validator.

    Example:
        ```python
        validator = Validator()
        validator.validate(
            {"foo": 1},
            {
                "foo": {"is": "int"},
                "bar": {"is": "string", "default": "baz"},
            },
        )
        # -> {"foo": 1, "bar": "baz"}
        ```

    Each instance owns a :class:`ConstraintRegistry`. By default it gets a
    private copy of the built-in checkers; pass *registry* to share one.
    """

    def __init__(self, registry: Optional[ConstraintRegistry] = None):
        self._registry = registry if registry is not None else ConstraintRegistry.with_builtins()

    @property
    def registry(self) -> ConstraintRegistry:
        return self._registry

    def validate(self, values: Any, specs: Any) -> ValueSet:
        """Validate *values* against *specs* and return the resolved values.

        Args:
            values: mapping of name -> value, a sequence of positional values,
                or a single scalar value.
            specs: mapping of name -> ParameterSpec, a sequence of
                ParameterSpec, or a single ParameterSpec.

        Returns:
            A new ``dict`` holding the supplied values plus any value filled in
            from ``default`` or ``builder``. Positional input is keyed by index.

        Raises:
            ParameterError: a required parameter is missing or a constraint failed.
            ConfigurationError: the spec is malformed.
            Exception: anything raised by a builder, unchanged.
        """

        start = time.perf_counter()
        with get_tracer().start_as_current_span("argvalidator.validate") as span:
            try:
                resolved, specs_by_key = normalize(values, specs)
                span.set_attribute("argvalidator.param_count", len(specs_by_key))
                for param, spec in specs_by_key.items():
                    if not isinstance(spec, Mapping):
                        raise ConfigurationError(
                            f"Spec for parameter '{param}' must be a mapping, got {type(spec).__name__}",
                            param=param,
                        )
                    value = self._resolve(param, spec, resolved)
                    if value is _MISSING:
                        continue
                    self._check(param, spec, value)
            except ArgValidatorError as error:
                logger.debug("Validation failed (%s): %s", error.code, error.message)
                span.set_attribute("argvalidator.failure", error.code)
                record_validation("failed", start, reason=error.code)
                raise
            except Exception:
                # Raised by a caller-supplied builder or checker.
                record_validation("error", start, reason="external")
                raise

        record_validation("ok", start)
        return resolved

    def _resolve(self, param: Hashable, spec: Mapping[str, Any], resolved: ValueSet) -> Any:
        """Ensure *param* has a value in *resolved*; return it, or ``_MISSING`` if optional."""

        if param in resolved:
            return resolved[param]

        if not spec.get(REQUIRED_KEY, True):
            logger.debug("Optional parameter '%s' absent; skipping its constraints", param)
            return _MISSING

        if DEFAULT_KEY in spec:
            value = spec[DEFAULT_KEY]
            logger.debug("Parameter '%s' resolved from default", param)
        elif BUILDER_KEY in spec:
            producer = decode_builder(param, spec[BUILDER_KEY])
            builder_invocation_total.add(1, {"kind": producer.kind})
            logger.debug("Parameter '%s' resolved by %s builder", param, producer.kind)
            value = producer.produce()
        else:
            raise MissingRequiredParameter(param)

        resolved[param] = value
        return value

    def _check(self, param: Hashable, spec: Mapping[str, Any], value: Any) -> None:
        for name, argument in spec.items():
            if name in CONTROL_KEYS:
                continue
            checker = self._registry.get(name)
            if checker is None:
                raise UnknownConstraint(param, name)
            checker(param, value, argument)


__all__ = ["Validator"]
