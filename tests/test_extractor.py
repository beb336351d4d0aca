from __future__ import annotations

import json
import logging

import pytest

from genai_gateway.core.extractor import extract_generated_text, resolve_path


def _candidates(text: object) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def test_wrapped_response_path() -> None:
    assert extract_generated_text({"response": _candidates("wrapped")}) == "wrapped"


def test_bare_candidates_path() -> None:
    assert extract_generated_text(_candidates("bare")) == "bare"


def test_content_level_text_path() -> None:
    data = {"response": {"candidates": [{"content": {"text": "content-level"}}]}}
    assert extract_generated_text(data) == "content-level"


def test_probe_order_when_several_paths_match() -> None:
    data = {
        "response": {
            "candidates": [{"content": {"parts": [{"text": "first"}], "text": "third"}}]
        },
        "candidates": [{"content": {"parts": [{"text": "second"}]}}],
    }
    assert extract_generated_text(data) == "first"

    data["response"]["candidates"][0]["content"]["parts"] = []
    assert extract_generated_text(data) == "second"

    del data["candidates"]
    assert extract_generated_text(data) == "third"


def test_empty_string_is_a_defined_value() -> None:
    assert extract_generated_text(_candidates("")) == ""


def test_non_string_text_is_serialized_as_json() -> None:
    assert extract_generated_text(_candidates(42)) == "42"
    out = extract_generated_text(_candidates({"a": 1}))
    assert json.loads(out) == {"a": 1}


def test_no_match_returns_pretty_dump(caplog: pytest.LogCaptureFixture) -> None:
    data = {"promptFeedback": {"blockReason": "SAFETY"}, "candidates": []}
    with caplog.at_level(logging.WARNING, logger="genai_gateway.core.extractor"):
        out = extract_generated_text(data)
    assert json.loads(out) == data
    assert "\n  " in out
    assert "No generated text found" in caplog.text


def test_none_and_scalars_are_dumped() -> None:
    assert extract_generated_text(None) == "null"
    assert extract_generated_text("plain") == '"plain"'


class _ExplodingMapping(dict):
    def get(self, key, default=None):  # noqa: ANN001
        raise RuntimeError("boom")


def test_probe_fault_falls_back_to_dump() -> None:
    out = extract_generated_text(_ExplodingMapping(status="weird"))
    assert json.loads(out) == {"status": "weird"}


def test_unserializable_response_never_raises() -> None:
    data: dict = {}
    data["self"] = data
    out = extract_generated_text(data)
    assert isinstance(out, str) and out


def test_resolve_path_stops_on_wrong_types() -> None:
    assert resolve_path({"candidates": "text"}, ("candidates", 0)) is None
    assert resolve_path({"candidates": []}, ("candidates", 0, "content")) is None
    assert resolve_path({"a": [{"b": 1}]}, ("a", -1, "b")) == 1
