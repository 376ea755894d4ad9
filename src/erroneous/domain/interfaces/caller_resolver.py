# src/erroneous/domain/interfaces/caller_resolver.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Call-site resolver interface.

Purpose:
    Define the narrow port the constructor uses to locate the call site of a
    new error. The concrete implementation inspects the interpreter stack and
    lives in the infrastructure layer; tests substitute deterministic stubs.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

__all__ = ["CallerResolver", "SourceLocation"]


class SourceLocation(NamedTuple):
    """File and line of a resolved stack frame."""

    file: str
    line: int


class CallerResolver(Protocol):
    """Protocol for callables that resolve a frame above the caller."""

    def __call__(self, skip: int) -> SourceLocation | None:
        """Resolve the frame ``skip`` levels above the calling function.

        Args:
            skip:
                Number of frames to skip. ``0`` is the function invoking the
                resolver, ``1`` its caller, and so on.

        Returns:
            The resolved location, or ``None`` when no such frame exists.
        """
        ...
