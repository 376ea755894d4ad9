# src/erroneous/api.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Public constructor.

Typical usage:
    from erroneous import Err, Msg, new

    def load(path):
        try:
            ...
        except OSError as exc:
            raise new(Msg("load failed", {"path": path}), Err(exc))
"""

from __future__ import annotations

from erroneous.dependencies.constructor import get_error_constructor
from erroneous.domain.value_objects.options import ErrOpt

__all__ = ["new"]


def new(*opts: ErrOpt) -> BaseException:
    """Return a new error record built from ``opts``.

    Options are applied in order. An :class:`~erroneous.Err` option wrapping an
    existing record ends construction and that record is returned unchanged.
    Unless :class:`~erroneous.Source` is given, the location ``depth`` frames
    above this call is recorded (default ``2``: the caller's caller).

    Args:
        *opts: Construction options.

    Returns:
        The new record, or the error returned by a short-circuiting option.
    """
    return get_error_constructor().new(*opts)
