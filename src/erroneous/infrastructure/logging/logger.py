# src/erroneous/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent configurator for the library's ``erroneous``
logger and a per-module logger factory that produce JSON logs suitable for
ingestion by log pipelines.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * ``extra=`` payloads passed to logging calls are merged into the line.
    * Exception enrichment: ``exc_type`` and ``exc_message`` for any error;
      ``exc_source`` and ``exc_fields`` for :class:`Erroneous` records.
    * No-throw formatting path.

The root logger is never touched: applications own global logging.

Typical usage:
    configure_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from erroneous.config.settings import get_settings
from erroneous.domain.interfaces.error_like import is_own_kind
from erroneous.domain.services.rendering import cause_text

__all__ = [
    "LIBRARY_LOGGER",
    "configure_logging",
    "get_json_logger",
]

LIBRARY_LOGGER = "erroneous"

_HANDLER_ATTR = "_erroneous_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        ts = datetime.now(tz=UTC).isoformat()
        payload: dict[str, Any] = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Exceptions: guard against None in exc_info tuple.
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload.update(_describe_exception(exc_value))

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        try:
            return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError, RecursionError):
            # Circular or otherwise unencodable extras: keep the stable keys only.
            stable = {k: payload[k] for k in ("ts", "level", "logger", "message")}
            for key in ("exc_type", "exc_message", "exc_source"):
                if key in payload:
                    stable[key] = payload[key]
            return json.dumps(stable, separators=(",", ":"), ensure_ascii=False, default=str)


def _describe_exception(exc: BaseException) -> dict[str, Any]:
    """Return the exception keys for a log payload."""
    if not is_own_kind(exc):
        return {"exc_message": cause_text(exc)}

    described: dict[str, Any] = {"exc_message": exc.message()}
    file, line = exc.source()
    if file:
        described["exc_source"] = f"{file}:{line}"
    fields = exc.fields()
    if fields:
        described["exc_fields"] = fields
    return described


def _resolve_level(level: str | int | None) -> int | str:
    if level is None:
        return get_settings().log_level
    return level.upper() if isinstance(level, str) else level


def configure_logging(
    level: str | int | None = None,
    *,
    json_mode: bool | None = None,
) -> logging.Logger:
    """Initialize the ``erroneous`` logger with a stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use settings
            (``ERRONEOUS_LOG_LEVEL``, default ``WARNING``).
        json_mode: JSON (``True``) or plain text (``False``) lines. If ``None``,
            use settings (``ERRONEOUS_LOG_JSON``).

    Returns:
        The configured library logger.
    """
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(_resolve_level(level))

    use_json = get_settings().log_json if json_mode is None else json_mode
    formatter: logging.Formatter = _JsonFormatter() if use_json else logging.Formatter(_PLAIN_FORMAT)

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            # Already configured; only refresh the formatter.
            handler.setFormatter(formatter)
            return logger

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    return logger


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger under the library handler.

    This does *not* implicitly configure the library logger. Call
    :func:`configure_logging` once to attach a handler.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    # Delegate formatting and level to the library logger.
    logger.propagate = True
    return logger
