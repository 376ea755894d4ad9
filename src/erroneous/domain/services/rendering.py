# src/erroneous/domain/services/rendering.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Text rendering for structured error records.

Purpose:
    Derive the two textual views of an :class:`Erroneous` record:

    * ``message``: base message plus the cause text.
    * ``error``: message, then ``" [file:line]"``, then two spaces and the
      compact JSON object of the record's fields.

Layer:
    domain/services

Notes:
    - Rendering is best-effort. Field serialization failures are swallowed and
      the fields segment is omitted; formatting an error must never raise.
    - ``None`` stands in for "no record" and renders as :data:`UNKNOWN_ERROR`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from erroneous.domain.entities.erroneous import Erroneous

__all__ = [
    "UNKNOWN_ERROR",
    "cause_text",
    "error_text",
    "render_error",
    "render_message",
    "serialize_fields",
]

UNKNOWN_ERROR = "unknown error"


def _encode_default(value: Any) -> Any:
    """Encode exception values by their text; reject everything else."""
    if isinstance(value, BaseException):
        return cause_text(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_fields(fields: Mapping[str, Any]) -> str:
    """Serialize fields as a compact JSON object with sorted keys.

    Args:
        fields: Mapping to serialize.

    Returns:
        The JSON text, or an empty string when the mapping is empty or cannot
        be serialized.
    """
    if not fields:
        return ""
    try:
        return json.dumps(
            fields,
            default=_encode_default,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError):
        return ""


def cause_text(cause: BaseException) -> str:
    """Return the text of a wrapped error.

    Records of this library render with their full ``error()`` text; any other
    exception renders as ``str(exc)``.
    """
    # Deferred: the entity module imports this one.
    from erroneous.domain.interfaces.error_like import is_own_kind

    if is_own_kind(cause):
        return render_error(cause)
    try:
        return str(cause)
    except Exception:  # pragma: no cover - defensive
        return type(cause).__name__


def render_message(record: Erroneous) -> str:
    """Render the message view of ``record``."""
    msg = record.msg
    cause = record.cause
    if cause is not None:
        if msg:
            msg += ": "
        msg += cause_text(cause)
    return msg


def render_error(record: Erroneous | None) -> str:
    """Render the full error view of ``record``.

    Args:
        record: Record to render, or ``None``.

    Returns:
        ``message`` followed by the optional ``" [file:line]"`` and fields
        segments, or :data:`UNKNOWN_ERROR` when ``record`` is ``None``.
    """
    if record is None:
        return UNKNOWN_ERROR

    text = render_message(record)

    file, line = record.source()
    if file:
        text += f" [{file}:{line}]"

    fields = record.fields()
    if fields is not None:
        data = serialize_fields(fields)
        if data:
            text += "  " + data

    return text


def error_text(err: BaseException | None) -> str:
    """Return the full text of any error value, tolerating ``None``.

    Args:
        err: A record, any other exception, or ``None``.

    Returns:
        :data:`UNKNOWN_ERROR` for ``None``; otherwise the same text the error
        contributes when wrapped as a cause.
    """
    if err is None:
        return UNKNOWN_ERROR
    return cause_text(err)
