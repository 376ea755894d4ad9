# src/erroneous/domain/entities/error_builder.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Mutable builder for :class:`Erroneous` records.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from erroneous.domain.entities.erroneous import Erroneous, ErrFields

DEFAULT_CAPTURE_DEPTH = 2


@dataclass(slots=True)
class ErrorBuilder:
    """In-progress state of a record under construction.

    Attributes:
        msg:
            Base message.
        cause:
            Wrapped error.
        fields:
            Structured fields, ``None`` until an option sets them.
        file:
            Source file; automatic capture runs only while this is empty.
        line:
            Source line.
        depth:
            Frames to skip above the constructor when capturing the call site.
    """

    msg: str = ""
    cause: BaseException | None = None
    fields: ErrFields | None = None
    file: str = ""
    line: int = 0
    depth: int = DEFAULT_CAPTURE_DEPTH

    def build(self) -> Erroneous:
        """Freeze the current state into a record."""
        return Erroneous(
            self.msg,
            cause=self.cause,
            fields=self.fields,
            file=self.file,
            line=self.line,
        )
