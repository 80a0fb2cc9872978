# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so tests and long-running processes can change
them without re-importing the package.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

REPR_LIMIT_ENV = "ARGVALIDATOR_REPR_LIMIT"
DEFAULT_REPR_LIMIT = 80


def get_repr_limit() -> int:
    """Maximum length of a value ``repr`` embedded in error messages."""

    raw = os.getenv(REPR_LIMIT_ENV, "")
    if not raw:
        return DEFAULT_REPR_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r; using %d", REPR_LIMIT_ENV, raw, DEFAULT_REPR_LIMIT)
        return DEFAULT_REPR_LIMIT
    if limit < 8:
        logger.warning("%s=%d is too small; using 8", REPR_LIMIT_ENV, limit)
        return 8
    return limit


__all__ = ["DEFAULT_REPR_LIMIT", "REPR_LIMIT_ENV", "get_repr_limit"]
