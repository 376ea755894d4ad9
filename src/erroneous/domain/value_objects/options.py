# src/erroneous/domain/value_objects/options.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Construction options for :func:`erroneous.api.new`.

Purpose:
    Each option is a small immutable value object that, when applied to an
    :class:`ErrorBuilder`, sets one slot of the record under construction.
    Applying an option returns either ``None`` (continue) or an existing error
    value, which the constructor returns as-is in place of a new record.

Options:
    * :class:`Msg`: message, plus optional fields whose ``"error"`` entry is
      promoted to the cause.
    * :class:`Fields`: fields only.
    * :class:`Err`: wrapped cause; passes existing records through unchanged.
    * :class:`Source`: explicit file/line, disabling automatic capture.
    * :class:`Depth`: frames to skip for automatic capture.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from erroneous.domain.entities.erroneous import ErrFields
from erroneous.domain.entities.error_builder import ErrorBuilder
from erroneous.domain.interfaces.error_like import is_error_like, is_own_kind

__all__ = ["Depth", "Err", "ErrOpt", "Fields", "Msg", "Source"]

ErrOpt: TypeAlias = Callable[[ErrorBuilder], BaseException | None]

CAUSE_FIELD = "error"


@dataclass(frozen=True, slots=True)
class Err:
    """Attach an existing error as the cause.

    Attributes:
        err:
            Error to wrap. An :class:`Erroneous` record short-circuits
            construction and is returned unchanged.
    """

    err: BaseException | None

    def __call__(self, builder: ErrorBuilder) -> BaseException | None:
        if is_own_kind(self.err):
            return self.err
        builder.cause = self.err
        return None


@dataclass(frozen=True, slots=True)
class Msg:
    """Attach a message and, optionally, fields.

    When ``fields`` holds an error value under ``"error"``, it is applied as
    ``Err(value)`` right after the message and fields are set.

    Attributes:
        text:
            Base message.
        fields:
            Structured fields; ``None`` leaves the fields slot untouched.
    """

    text: str
    fields: ErrFields | None = None

    def __call__(self, builder: ErrorBuilder) -> BaseException | None:
        builder.msg = self.text
        if self.fields is not None:
            builder.fields = self.fields
            value: Any = self.fields.get(CAUSE_FIELD)
            if is_error_like(value):
                return Err(value)(builder)
        return None


@dataclass(frozen=True, slots=True)
class Fields:
    """Attach fields without cause promotion.

    Attributes:
        fields:
            Structured fields, stored by reference.
    """

    fields: ErrFields | None

    def __call__(self, builder: ErrorBuilder) -> BaseException | None:
        builder.fields = self.fields
        return None


@dataclass(frozen=True, slots=True)
class Source:
    """Set the source location explicitly.

    Attributes:
        file: Source file; an empty string still allows automatic capture.
        line: Source line.
    """

    file: str
    line: int

    def __call__(self, builder: ErrorBuilder) -> BaseException | None:
        builder.file = self.file
        builder.line = self.line
        return None


@dataclass(frozen=True, slots=True)
class Depth:
    """Set how many frames above the constructor automatic capture skips.

    Attributes:
        depth: ``0`` is the constructor frame, ``1`` its caller, and so on.
            Negative values disable capture.
    """

    depth: int

    def __call__(self, builder: ErrorBuilder) -> BaseException | None:
        builder.depth = self.depth
        return None
