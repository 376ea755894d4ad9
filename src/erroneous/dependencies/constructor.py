# src/erroneous/dependencies/constructor.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the default error constructor.

Purpose:
    Compose the application-layer :class:`ErrorConstructor` with the
    interpreter stack resolver and the configured default capture depth.
    The instance is cached; call ``get_error_constructor.cache_clear()``
    (together with ``get_settings.cache_clear()``) to pick up new settings.

Notes:
    Invalid settings never reach callers of :func:`erroneous.api.new`; the
    constructor falls back to the built-in default depth and logs a warning.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from erroneous.application.constructor import ErrorConstructor
from erroneous.config.settings import get_settings
from erroneous.domain.entities.error_builder import DEFAULT_CAPTURE_DEPTH
from erroneous.infrastructure.introspection.caller import capture_caller

__all__ = ["API_STACK_OFFSET", "get_error_constructor"]

logger = logging.getLogger(__name__)

# Frames contributed by erroneous.api.new on top of ErrorConstructor.new.
API_STACK_OFFSET = 1


def _default_depth() -> int:
    """Return the configured capture depth, or the default on invalid settings."""
    try:
        return get_settings().capture_depth
    except RuntimeError as exc:
        logger.warning(
            "erroneous.constructor.invalid_settings",
            extra={"error": str(exc), "fallback_depth": DEFAULT_CAPTURE_DEPTH},
        )
        return DEFAULT_CAPTURE_DEPTH


@lru_cache(maxsize=1)
def get_error_constructor() -> ErrorConstructor:
    """Return the process-wide constructor used by :func:`erroneous.api.new`."""
    depth = _default_depth()
    logger.debug(
        "erroneous.constructor.init",
        extra={"default_depth": depth, "stack_offset": API_STACK_OFFSET},
    )
    return ErrorConstructor(
        resolver=capture_caller,
        default_depth=depth,
        stack_offset=API_STACK_OFFSET,
    )
