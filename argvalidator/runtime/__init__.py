"""Runtime helpers: the process-wide validator and its registry."""

from .validation import (
    format_failure,
    get_registry,
    get_validator,
    register_constraint,
    validate,
)

__all__ = [
    "format_failure",
    "get_registry",
    "get_validator",
    "register_constraint",
    "validate",
]
