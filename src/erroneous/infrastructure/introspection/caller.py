# src/erroneous/infrastructure/introspection/caller.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Interpreter stack resolver.

Implements :class:`erroneous.domain.interfaces.caller_resolver.CallerResolver`
on top of ``sys._getframe``, the same primitive the standard ``logging``
module uses to find the caller of a log call.
"""

from __future__ import annotations

import sys

from erroneous.domain.interfaces.caller_resolver import SourceLocation

__all__ = ["capture_caller"]


def capture_caller(skip: int) -> SourceLocation | None:
    """Resolve the frame ``skip`` levels above the function calling this one.

    Args:
        skip: ``0`` for the direct caller of :func:`capture_caller`, ``1`` for
            its caller, and so on.

    Returns:
        The frame's filename and current line, or ``None`` when ``skip`` is
        negative or deeper than the stack.
    """
    if skip < 0:
        return None
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return None
    return SourceLocation(frame.f_code.co_filename, frame.f_lineno)
