# src/erroneous/application/constructor.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Constructor for structured error records.

Scope:
    * Start a fresh :class:`ErrorBuilder` per call.
    * Apply options strictly in order; the first option returning an error
      ends construction and that error is returned instead.
    * When no source location was supplied, resolve the call site through the
      injected :class:`CallerResolver`.
    * Freeze the builder into an :class:`Erroneous` record.

Notes:
    * Capture depth counts frames above the public constructor: ``0`` is the
      constructor frame, ``1`` its caller, ``2`` the caller's caller.
    * Wrappers that delegate to :meth:`ErrorConstructor.new` declare their own
      frames through ``stack_offset`` so depth stays relative to them.
"""

from __future__ import annotations

import logging

from erroneous.domain.entities.error_builder import DEFAULT_CAPTURE_DEPTH, ErrorBuilder
from erroneous.domain.interfaces.caller_resolver import CallerResolver
from erroneous.domain.value_objects.options import ErrOpt

__all__ = ["ErrorConstructor"]

logger = logging.getLogger(__name__)


class ErrorConstructor:
    """Assemble records from an ordered sequence of options.

    Args:
        resolver: Call-site resolver used when no :class:`Source` is given.
        default_depth: Initial capture depth of every builder.
        stack_offset: Wrapper frames between the public constructor and
            :meth:`new`.
    """

    def __init__(
        self,
        *,
        resolver: CallerResolver,
        default_depth: int = DEFAULT_CAPTURE_DEPTH,
        stack_offset: int = 0,
    ) -> None:
        """Initialize the constructor.

        Args:
            resolver: Call-site resolver.
            default_depth: Initial capture depth.
            stack_offset: Wrapper frames above :meth:`new`.
        """
        self._resolver = resolver
        self._default_depth = default_depth
        self._stack_offset = stack_offset

    def new(self, *opts: ErrOpt) -> BaseException:
        """Build a record from ``opts``.

        Args:
            *opts: Options applied in order.

        Returns:
            A new :class:`Erroneous` record, or the error returned by the first
            short-circuiting option.
        """
        builder = ErrorBuilder(depth=self._default_depth)

        for index, opt in enumerate(opts):
            result = opt(builder)
            if result is not None:
                logger.debug(
                    "erroneous.new.short_circuit",
                    extra={
                        "option_index": index,
                        "option": type(opt).__name__,
                        "result_type": type(result).__name__,
                    },
                )
                return result

        if not builder.file:
            self._capture(builder)

        return builder.build()

    def _capture(self, builder: ErrorBuilder) -> None:
        """Fill in the builder's source location from the call stack."""
        location = None
        if builder.depth >= 0:
            # +1 skips this helper; new() itself is frame 0 when stack_offset is 0.
            location = self._resolver(builder.depth + self._stack_offset + 1)
        if location is None:
            logger.debug(
                "erroneous.new.capture_failed",
                extra={"depth": builder.depth, "stack_offset": self._stack_offset},
            )
            return
        builder.file, builder.line = location
