# src/erroneous/domain/entities/erroneous.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Structured error record.

Purpose:
    Define :class:`Erroneous`, the error value produced by
    :func:`erroneous.api.new`. A record carries a human message, an optional
    wrapped cause, a bag of structured fields, and the file/line where it was
    created.

Layer:
    domain/entities

Notes:
    - Records are built through :class:`ErrorBuilder` and never mutated by the
      library afterwards.
    - Text rendering is delegated to :mod:`erroneous.domain.services.rendering`
      and computed lazily on every accessor call.
"""

from __future__ import annotations

from typing import Any

from erroneous.domain.services.rendering import render_error, render_message

ErrFields = dict[str, Any]


class Erroneous(Exception):
    """Error which keeps track of the place it was created.

    Attributes:
        msg:
            Base human-readable message. May be empty.
        cause:
            Wrapped underlying error, if any. Mirrored on ``__cause__`` so that
            tracebacks chain naturally when the record is raised.

    Structured fields and the call site are read through :meth:`fields` and
    :meth:`source`.
    """

    __slots__ = ("_msg", "_cause", "_fields", "_file", "_line")

    def __init__(
        self,
        msg: str = "",
        *,
        cause: BaseException | None = None,
        fields: ErrFields | None = None,
        file: str = "",
        line: int = 0,
    ) -> None:
        """Initialize a record.

        Callers should prefer :func:`erroneous.api.new`; direct construction
        skips the option protocol and automatic call-site capture.

        Args:
            msg: Base message.
            cause: Wrapped error.
            fields: Structured fields; stored by reference.
            file: Source file.
            line: Source line.
        """
        super().__init__(msg)
        self._msg = msg
        self._cause = cause
        self._fields = fields
        self._file = file
        self._line = line
        if cause is not None:
            self.__cause__ = cause

    @property
    def msg(self) -> str:
        """Return the base message without the cause text."""
        return self._msg

    @property
    def cause(self) -> BaseException | None:
        """Return the wrapped error, if any."""
        return self._cause

    def message(self) -> str:
        """Return the base message joined with the cause text, if any."""
        return render_message(self)

    def error(self) -> str:
        """Return the full rendering: message, source location and fields."""
        return render_error(self)

    def source(self) -> tuple[str, int]:
        """Return the ``(file, line)`` pair verbatim."""
        return self._file, self._line

    def fields(self) -> ErrFields | None:
        """Return the attached fields mapping itself (no copy)."""
        return self._fields

    def __reduce__(self) -> tuple[Any, ...]:
        # BaseException.__reduce__ only carries args; keep every slot.
        state: dict[str, Any] = {
            "_cause": self._cause,
            "_fields": self._fields,
            "_file": self._file,
            "_line": self._line,
        }
        if self._cause is not None:
            state["__cause__"] = self._cause
        return type(self), (self._msg,), state

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(msg={self._msg!r}, cause={self._cause!r}, "
            f"fields={self._fields!r}, file={self._file!r}, line={self._line})"
        )
