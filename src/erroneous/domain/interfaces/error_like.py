# src/erroneous/domain/interfaces/error_like.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Error capability checks.

Purpose:
    Name the two type decisions the option protocol depends on:

    * :func:`is_error_like`: the value can be wrapped as a cause.
    * :func:`is_own_kind`: the value is already an :class:`Erroneous` record
      and must be passed through instead of re-wrapped.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from typing import Any, TypeAlias, TypeGuard

from erroneous.domain.entities.erroneous import Erroneous

__all__ = ["ErrorLike", "is_error_like", "is_own_kind"]

ErrorLike: TypeAlias = BaseException


def is_error_like(value: Any) -> TypeGuard[ErrorLike]:
    """Return ``True`` when ``value`` is an exception instance."""
    return isinstance(value, BaseException)


def is_own_kind(value: Any) -> TypeGuard[Erroneous]:
    """Return ``True`` when ``value`` is a record produced by this library."""
    return isinstance(value, Erroneous)
