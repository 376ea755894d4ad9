# src/erroneous/__init__.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""erroneous package

Structured errors that carry a message, an optional wrapped cause, a bag of
contextual fields and the source location where they were created.

Public API (re-exported):
    - Constructor: :func:`new`, :class:`ErrorConstructor`
    - Options: :class:`Msg`, :class:`Fields`, :class:`Err`, :class:`Source`,
      :class:`Depth`, ``ErrOpt``
    - Record: :class:`Erroneous`, ``ErrFields``, :func:`error_text`
    - Ambient: :func:`configure_logging`, :func:`get_settings`
"""

from __future__ import annotations

from erroneous.api import new
from erroneous.application.constructor import ErrorConstructor
from erroneous.config.settings import get_settings
from erroneous.domain.entities.erroneous import Erroneous, ErrFields
from erroneous.domain.services.rendering import error_text
from erroneous.domain.value_objects.options import Depth, Err, ErrOpt, Fields, Msg, Source
from erroneous.infrastructure.logging.logger import configure_logging

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Depth",
    "Err",
    "ErrFields",
    "ErrOpt",
    "Erroneous",
    "ErrorConstructor",
    "Fields",
    "Msg",
    "Source",
    "configure_logging",
    "error_text",
    "get_settings",
    "new",
]
