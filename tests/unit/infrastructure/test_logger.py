# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from erroneous.domain.entities.erroneous import Erroneous
from erroneous.infrastructure.logging.logger import (
    LIBRARY_LOGGER,
    _JsonFormatter,  # internal but importable
    configure_logging,
    get_json_logger,
)


@pytest.fixture(autouse=True)
def _restore_library_logger() -> Generator[None, None, None]:
    logger = logging.getLogger(LIBRARY_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _format(record_msg: str, exc: BaseException | None = None, **extra: object) -> dict:
    """Build a record manually and return the parsed JSON payload."""
    exc_info = (type(exc), exc, None) if exc is not None else None
    record = logging.getLogger("test.logger").makeRecord(
        name="test.logger",
        level=logging.ERROR,
        fn="test_logger",
        lno=123,
        msg=record_msg,
        args=(),
        exc_info=exc_info,
        extra=extra or None,
    )
    return json.loads(_JsonFormatter().format(record))


def test_json_formatter_basic_fields() -> None:
    payload = _format("hello-world")

    assert payload["message"] == "hello-world"
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload
    assert "exc_type" not in payload


def test_json_formatter_merges_extra_payload() -> None:
    payload = _format("erroneous.new.short_circuit", option_index=1, option="Err")

    assert payload["option_index"] == 1
    assert payload["option"] == "Err"


def test_json_formatter_describes_plain_exceptions() -> None:
    payload = _format("failure", exc=ValueError("boom"))

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"
    assert "exc_source" not in payload


def test_json_formatter_enriches_records_with_source_and_fields() -> None:
    rec = Erroneous("load failed", cause=OSError("gone"), fields={"path": "/tmp/x"}, file="f.py", line=9)

    payload = _format("failure", exc=rec)

    assert payload["exc_type"] == "Erroneous"
    assert payload["exc_message"] == "load failed: gone"
    assert payload["exc_source"] == "f.py:9"
    assert payload["exc_fields"] == {"path": "/tmp/x"}


def test_json_formatter_stringifies_unencodable_extras() -> None:
    payload = _format("odd", handle=object())

    assert payload["handle"].startswith("<object object")


def test_json_formatter_survives_circular_extras() -> None:
    loop: dict = {}
    loop["self"] = loop

    payload = _format("loop", exc=ValueError("boom"), data=loop)

    assert payload["message"] == "loop"
    assert payload["exc_message"] == "boom"
    assert "data" not in payload


def test_configure_logging_is_idempotent_and_respects_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ERRONEOUS_LOG_LEVEL", "debug")

    logger = configure_logging()
    configure_logging()

    assert logger.name == LIBRARY_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, _JsonFormatter)


def test_configure_logging_plain_mode_and_explicit_level() -> None:
    logger = configure_logging("info", json_mode=False)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0].formatter, _JsonFormatter)


def test_get_json_logger_propagates() -> None:
    logger = get_json_logger("erroneous.tests.child")

    assert logger.name == "erroneous.tests.child"
    assert logger.propagate is True
