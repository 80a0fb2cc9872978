"""Validation package - argument resolution and constraint checking.

This package turns caller-supplied values plus declarative per-parameter specs
into a resolved value set. Defaults and builders fill in missing values;
constraints are pure predicate checks. No coercion happens here.
"""

from .base import CONTROL_KEYS, normalize, normalize_specs, normalize_values
from .builders import CallableProducer, MethodProducer, ValueProducer, decode_builder
from .constraints import ConstraintRegistry, TYPE_PREDICATES, register_type
from .validator import Validator

__all__ = [
    "CONTROL_KEYS",
    "CallableProducer",
    "ConstraintRegistry",
    "MethodProducer",
    "TYPE_PREDICATES",
    "Validator",
    "ValueProducer",
    "decode_builder",
    "normalize",
    "normalize_specs",
    "normalize_values",
    "register_type",
]
