"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
import base64
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

from genai_gateway.common.errors import ValidationError

DEFAULT_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class TextPart:
    """Plain-text instruction segment."""
    text: str

    def to_payload(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class BlobPart:
    """Binary media segment, base64-encoded for transport."""
    data: str
    media_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, media_type: str) -> BlobPart:
        return cls(data=base64.b64encode(raw).decode("ascii"), media_type=media_type)

    def decoded(self) -> bytes:
        return base64.b64decode(self.data)

    def to_payload(self) -> dict[str, Any]:
        return {"inlineData": {"mimeType": self.media_type, "data": self.data}}


GenerationPart = Union[TextPart, BlobPart]


@dataclass(frozen=True)
class Attachment:
    """An uploaded file held in memory for the duration of one request."""
    data: bytes
    media_type: str = DEFAULT_MEDIA_TYPE
    filename: str | None = None


@dataclass(frozen=True)
class GenerationRequest:
    """Ordered, provider-agnostic sequence of generation parts.

    At least one part is required and at most one part may be a blob.
    """
    parts: tuple[GenerationPart, ...]

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValidationError("generation request needs at least one part")
        blobs = sum(1 for p in self.parts if isinstance(p, BlobPart))
        if blobs > 1:
            raise ValidationError("only one attachment per request is supported")

    @property
    def blob(self) -> BlobPart | None:
        for part in self.parts:
            if isinstance(part, BlobPart):
                return part
        return None

    def to_payload(self) -> dict[str, Any]:
        """Render the Gemini generateContent request body."""
        return {
            "contents": [
                {"role": "user", "parts": [p.to_payload() for p in self.parts]}
            ]
        }


class GenerateTextIn(BaseModel):
    prompt: str | None = None

class GenerateOut(BaseModel):
    result: str

class ErrorOut(BaseModel):
    message: str
