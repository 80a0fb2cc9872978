# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint registry and the built-in constraint checkers.

A checker is any callable ``checker(param, value, argument) -> None`` that
raises :class:`~argvalidator.exceptions.ConstraintViolation` (or a subclass)
when *value* does not satisfy the constraint described by *argument*. Checkers
are looked up by spec key in a :class:`ConstraintRegistry`, so new constraint
names can be added without touching the existing ones.

Built-in constraints:

* ``is``          runtime type category (``"int"``, ``"string"``, ``"array"``…)
* ``regex``       ``str(value)`` must match a pattern
* ``instanceof``  ``isinstance(value, argument)``
"""

from __future__ import annotations

import functools
import logging
import numbers
import re
from decimal import Decimal
from typing import Any, Callable, Dict, Hashable, Iterator, Mapping, Optional

from ..exceptions import (
    InstanceofMismatch,
    InvalidConstraintArgument,
    PatternMismatch,
    TypeMismatch,
)
from .base import CONTROL_KEYS, is_sequence, resolve_reference

logger = logging.getLogger(__name__)

Checker = Callable[[Hashable, Any, Any], None]


# ---------------------------------------------------------------------------
# Type categories for the ``is`` constraint
# ---------------------------------------------------------------------------

_SCALAR_TYPES = (str, bytes, bool, int, float)
_BUILTIN_DATA_TYPES = (str, bytes, bytearray, bool, int, float, complex, list, tuple, dict, set, frozenset)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def _is_object(value: Any) -> bool:
    # Instances of user-defined classes; not None, builtin data or classes.
    return value is not None and not isinstance(value, (_BUILTIN_DATA_TYPES, type))


TYPE_PREDICATES: Dict[str, Callable[[Any], bool]] = {
    "int": _is_int,
    "integer": _is_int,
    "float": _is_float,
    "double": _is_float,
    "numeric": _is_numeric,
    "bool": lambda v: isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "string": lambda v: isinstance(v, str),
    "str": lambda v: isinstance(v, str),
    "bytes": lambda v: isinstance(v, (bytes, bytearray)),
    "array": is_sequence,
    "sequence": is_sequence,
    "list": lambda v: isinstance(v, list),
    "tuple": lambda v: isinstance(v, tuple),
    "dict": lambda v: isinstance(v, Mapping),
    "mapping": lambda v: isinstance(v, Mapping),
    "set": lambda v: isinstance(v, (set, frozenset)),
    "object": _is_object,
    "callable": callable,
    "scalar": lambda v: isinstance(v, _SCALAR_TYPES),
    "null": lambda v: v is None,
    "none": lambda v: v is None,
}


def register_type(name: str, predicate: Callable[[Any], bool], *, replace: bool = False) -> None:
    """Make *name* usable as the argument of the ``is`` constraint."""

    if name in TYPE_PREDICATES and not replace:
        raise ValueError(f"Type name '{name}' is already registered")
    TYPE_PREDICATES[name] = predicate
    logger.info("Registered type name '%s' for the 'is' constraint", name)


def check_is(param: Hashable, value: Any, type_name: Any) -> None:
    predicate = TYPE_PREDICATES.get(type_name) if isinstance(type_name, str) else None
    if predicate is None:
        raise InvalidConstraintArgument(
            param,
            "is",
            type_name,
            f"unknown type name (known: {', '.join(sorted(TYPE_PREDICATES))})",
        )
    if not predicate(value):
        raise TypeMismatch(param, value, type_name)


# ---------------------------------------------------------------------------
# ``regex``
# ---------------------------------------------------------------------------

# Delimited "/body/flags" form, e.g. "/^(fee|fye)$/i".
_DELIMITED = re.compile(r"^/(?P<body>.*)/(?P<flags>[imsx]*)$", re.DOTALL)
_FLAG_BITS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile *pattern*, honouring the ``/body/flags`` delimited form."""

    delimited = _DELIMITED.match(pattern)
    if delimited:
        flags = 0
        for letter in delimited.group("flags"):
            flags |= _FLAG_BITS[letter]
        return re.compile(delimited.group("body"), flags)
    return re.compile(pattern)


def check_regex(param: Hashable, value: Any, pattern: Any) -> None:
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    elif isinstance(pattern, str):
        try:
            compiled = compile_pattern(pattern)
        except re.error as exc:
            raise InvalidConstraintArgument(param, "regex", pattern, f"invalid regex pattern: {exc}") from exc
    else:
        raise InvalidConstraintArgument(param, "regex", pattern, "expected a string or compiled pattern")

    if isinstance(value, (bytes, bytearray)):
        text = value.decode("utf-8", errors="replace")
    else:
        text = str(value)
    if compiled.search(text) is None:
        raise PatternMismatch(param, value, pattern)


# ---------------------------------------------------------------------------
# ``instanceof``
# ---------------------------------------------------------------------------


def check_instanceof(param: Hashable, value: Any, type_ref: Any) -> None:
    expected = type_ref
    if isinstance(type_ref, str):
        try:
            expected = resolve_reference(type_ref)
        except (ImportError, AttributeError, ValueError) as exc:
            raise InvalidConstraintArgument(param, "instanceof", type_ref, f"cannot import: {exc}") from exc

    try:
        matched = isinstance(value, expected)
    except TypeError as exc:
        raise InvalidConstraintArgument(
            param, "instanceof", type_ref, "expected a class, a tuple of classes or an import path"
        ) from exc
    if not matched:
        raise InstanceofMismatch(param, value, expected)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ConstraintRegistry:
    """Mapping of constraint name -> checker.

    Example:
        ```python
        registry = ConstraintRegistry.with_builtins()

        @registry.register("max")
        def check_max(param, value, limit):
            if value > limit:
                raise ConstraintViolation(param, value, "max", limit)
        ```
    """

    def __init__(self, checkers: Optional[Mapping[str, Checker]] = None):
        self._checkers: Dict[str, Checker] = {}
        for name, checker in (checkers or {}).items():
            self.register(name, checker)

    @classmethod
    def with_builtins(cls) -> "ConstraintRegistry":
        return cls(BUILTIN_CHECKERS)

    def register(self, name: str, checker: Optional[Checker] = None, *, replace: bool = False):
        """Register *checker* under *name*; usable as a decorator when *checker* is omitted."""

        if checker is None:
            def decorator(func: Checker) -> Checker:
                self.register(name, func, replace=replace)
                return func

            return decorator

        if not isinstance(name, str) or not name:
            raise ValueError("Constraint name must be a non-empty string")
        if name in CONTROL_KEYS:
            raise ValueError(f"'{name}' is a reserved spec key and cannot name a constraint")
        if not callable(checker):
            raise TypeError(f"Checker for constraint '{name}' is not callable")
        if name in self._checkers and not replace:
            raise ValueError(f"Constraint '{name}' is already registered; pass replace=True to override")

        self._checkers[name] = checker
        logger.debug("Registered constraint '%s' -> %r", name, checker)
        return checker

    def unregister(self, name: str) -> None:
        self._checkers.pop(name, None)

    def get(self, name: str) -> Optional[Checker]:
        return self._checkers.get(name)

    def copy(self) -> "ConstraintRegistry":
        return ConstraintRegistry(self._checkers)

    def names(self) -> list[str]:
        return list(self._checkers)

    def __contains__(self, name: object) -> bool:
        return name in self._checkers

    def __iter__(self) -> Iterator[str]:
        return iter(self._checkers)

    def __len__(self) -> int:
        return len(self._checkers)


BUILTIN_CHECKERS: Dict[str, Checker] = {
    "is": check_is,
    "regex": check_regex,
    "instanceof": check_instanceof,
}


__all__ = [
    "BUILTIN_CHECKERS",
    "Checker",
    "ConstraintRegistry",
    "TYPE_PREDICATES",
    "check_instanceof",
    "check_is",
    "check_regex",
    "compile_pattern",
    "register_type",
]
