from __future__ import annotations

import json

import pytest

from erroneous.domain.entities.erroneous import Erroneous
from erroneous.domain.services.rendering import (
    UNKNOWN_ERROR,
    cause_text,
    error_text,
    render_error,
    render_message,
    serialize_fields,
)


def test_render_error_on_missing_record_returns_fallback() -> None:
    assert render_error(None) == "unknown error"
    assert error_text(None) == UNKNOWN_ERROR


def test_error_text_matches_record_error_and_plain_str() -> None:
    rec = Erroneous("m", file="f.py", line=1)

    assert error_text(rec) == rec.error()
    assert error_text(RuntimeError("plain")) == "plain"


def test_serialize_fields_is_compact_and_sorted() -> None:
    assert serialize_fields({"b": 2, "a": 1}) == '{"a":1,"b":2}'


def test_serialize_fields_keeps_non_ascii() -> None:
    assert serialize_fields({"city": "Zürich"}) == '{"city":"Zürich"}'


def test_serialize_fields_encodes_exceptions_as_text() -> None:
    data = serialize_fields({"error": ValueError("boom"), "id": 1})

    assert json.loads(data) == {"error": "boom", "id": 1}


def test_serialize_fields_swallows_failures() -> None:
    circular: dict = {}
    circular["self"] = circular

    assert serialize_fields({"x": {1, 2}}) == ""
    assert serialize_fields(circular) == ""
    assert serialize_fields({}) == ""


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_serialize_fields_rejects_non_finite_floats(value: float) -> None:
    assert serialize_fields({"x": value}) == ""
    assert serialize_fields({"ok": 1, "x": value}) == ""


def test_cause_text_uses_full_error_for_records() -> None:
    rec = Erroneous("inner", fields={"a": 1})

    assert cause_text(rec) == 'inner  {"a":1}'
    assert cause_text(KeyError("k")) == "'k'"


def test_render_message_matches_record_message() -> None:
    rec = Erroneous("", cause=TimeoutError("slow"))

    assert render_message(rec) == rec.message() == "slow"
