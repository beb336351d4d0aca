from __future__ import annotations

import pytest

from genai_gateway.common.errors import ValidationError
from genai_gateway.common.schema import Attachment, BlobPart, GenerationRequest, TextPart
from genai_gateway.core.normalizer import normalize_request


def test_text_only_prompt_is_trimmed() -> None:
    req = normalize_request("  write a haiku \n")
    assert req.parts == (TextPart("write a haiku"),)
    assert req.blob is None


@pytest.mark.parametrize("prompt", [None, "", "   \t"])
def test_missing_prompt_without_default_fails(prompt: str | None) -> None:
    with pytest.raises(ValidationError, match="prompt required"):
        normalize_request(prompt)


def test_default_prompt_is_used_verbatim() -> None:
    att = Attachment(data=b"abc", media_type="text/plain")
    req = normalize_request("  ", att, default_prompt="Summarize this document")
    assert req.parts[0] == TextPart("Summarize this document")


def test_prompt_wins_over_default() -> None:
    att = Attachment(data=b"abc", media_type="text/plain")
    req = normalize_request("List the headings", att, default_prompt="Summarize this document")
    assert req.parts[0] == TextPart("List the headings")


def test_attachment_round_trips_through_base64() -> None:
    raw = bytes(range(256)) * 4
    req = normalize_request("describe", Attachment(data=raw, media_type="image/jpeg"))
    text, blob = req.parts
    assert text == TextPart("describe")
    assert isinstance(blob, BlobPart)
    assert blob.media_type == "image/jpeg"
    assert blob.decoded() == raw
    assert blob.data.isascii()


def test_empty_media_type_falls_back_to_octet_stream() -> None:
    req = normalize_request("describe", Attachment(data=b"x", media_type=""))
    assert req.blob is not None
    assert req.blob.media_type == "application/octet-stream"


def test_required_attachment_missing() -> None:
    with pytest.raises(ValidationError, match="attachment required: 'audio'"):
        normalize_request(None, default_prompt="Transcribe", require_attachment=True, attachment_kind="audio")


def test_prompt_is_checked_before_attachment() -> None:
    with pytest.raises(ValidationError, match="prompt required"):
        normalize_request(None, require_attachment=True, attachment_kind="image")


def test_request_invariants() -> None:
    with pytest.raises(ValidationError):
        GenerationRequest(parts=())
    blob = BlobPart.from_bytes(b"a", "image/png")
    with pytest.raises(ValidationError):
        GenerationRequest(parts=(TextPart("x"), blob, blob))


def test_payload_matches_gemini_shape() -> None:
    req = normalize_request("hi", Attachment(data=b"\x00\x01", media_type="audio/wav"))
    assert req.to_payload() == {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": "hi"},
                    {"inlineData": {"mimeType": "audio/wav", "data": "AAE="}},
                ],
            }
        ]
    }
