# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Deferred value construction for the ``builder`` spec key.

A builder descriptor is decoded once into a :class:`ValueProducer`:

* :class:`CallableProducer` – a callable plus bound positional arguments.
  Built from a plain callable, or from a sequence whose first element is
  callable (``[func, arg1, arg2]``).
* :class:`MethodProducer` – a method looked up by name on a receiver.
  Built from a ``(receiver, "method")`` pair, or from a sequence whose first
  element is such a pair (``[(receiver, "method"), arg1, arg2]``).
  A string is never taken as a receiver.

Strings such as ``"package.module:function"`` name an importable callable and
are accepted wherever a callable is.

Example:
    ```python
    producer = decode_builder("started_at", [time.strftime, "%Y%m%d"])
    producer.produce()  # -> "20251019"
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional, Tuple

from ..exceptions import InvalidBuilderSpec
from .base import is_sequence, resolve_reference

logger = logging.getLogger(__name__)


class ValueProducer:
    """Abstract base for decoded builders; subclasses implement ``produce``."""

    kind = "producer"

    def produce(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class CallableProducer(ValueProducer):
    func: Callable[..., Any]
    args: Tuple[Any, ...] = field(default=())

    kind = "callable"

    def produce(self) -> Any:
        return self.func(*self.args)


@dataclass(frozen=True)
class MethodProducer(ValueProducer):
    receiver: Any
    method_name: str
    args: Tuple[Any, ...] = field(default=())

    kind = "method"

    def produce(self) -> Any:
        method = getattr(self.receiver, self.method_name)
        return method(*self.args)


def _method_pair(candidate: Any) -> Optional[Tuple[Any, str]]:
    """Return ``(receiver, name)`` if *candidate* is a bound-method reference."""

    if not is_sequence(candidate) or len(candidate) != 2:
        return None
    receiver, name = candidate
    # A string head is an import reference, never a receiver.
    if isinstance(receiver, str):
        return None
    if not isinstance(name, str) or not name:
        return None
    if not callable(getattr(receiver, name, None)):
        return None
    return receiver, name


def _as_callable(candidate: Any) -> Optional[Callable[..., Any]]:
    """Return *candidate* as a callable, importing it when given a reference string."""

    if isinstance(candidate, str):
        try:
            target = resolve_reference(candidate)
        except (ImportError, AttributeError, ValueError):
            logger.debug("Builder reference '%s' could not be imported", candidate)
            return None
        return target if callable(target) else None
    if callable(candidate):
        return candidate
    return None


def decode_builder(param: Hashable, descriptor: Any) -> ValueProducer:
    """Turn a ``builder`` spec value into a :class:`ValueProducer`.

    Raises:
        InvalidBuilderSpec: when no callable can be identified in *descriptor*.
    """

    if isinstance(descriptor, ValueProducer):
        return descriptor

    pair = _method_pair(descriptor)
    if pair is not None:
        return MethodProducer(pair[0], pair[1])

    if is_sequence(descriptor):
        if not descriptor:
            raise InvalidBuilderSpec(param, descriptor)
        head, rest = descriptor[0], tuple(descriptor[1:])
        pair = _method_pair(head)
        if pair is not None:
            return MethodProducer(pair[0], pair[1], rest)
        func = _as_callable(head)
        if func is not None:
            return CallableProducer(func, rest)
        raise InvalidBuilderSpec(param, descriptor)

    func = _as_callable(descriptor)
    if func is None:
        raise InvalidBuilderSpec(param, descriptor)
    return CallableProducer(func)


__all__ = [
    "CallableProducer",
    "MethodProducer",
    "ValueProducer",
    "decode_builder",
]
