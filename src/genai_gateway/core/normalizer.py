"""Turn a prompt and an optional upload into a GenerationRequest."""
from __future__ import annotations

from genai_gateway.common.errors import ValidationError
from genai_gateway.common.schema import (
    DEFAULT_MEDIA_TYPE,
    Attachment,
    BlobPart,
    GenerationPart,
    GenerationRequest,
    TextPart,
)

def normalize_request(
    prompt: str | None,
    attachment: Attachment | None = None,
    *,
    default_prompt: str | None = None,
    require_attachment: bool = False,
    attachment_kind: str = "attachment",
) -> GenerationRequest:
    """
    Build the parts sequence for one generation call.

    Args:
        prompt: Caller-supplied instruction; trimmed before use.
        attachment: At most one uploaded file.
        default_prompt: Substituted verbatim when the prompt is missing or blank.
        require_attachment: Reject the call when no attachment is present.
        attachment_kind: Form field name used in the error message.

    Returns:
        [TextPart] or [TextPart, BlobPart], text first.

    Raises:
        ValidationError: Prompt missing with no default, or attachment missing
            when required. The prompt is checked first.
    """
    text = (prompt or "").strip()
    if not text:
        if default_prompt is None:
            raise ValidationError("prompt required")
        text = default_prompt

    if attachment is None:
        if require_attachment:
            raise ValidationError(f"attachment required: '{attachment_kind}' file must be uploaded")
        return GenerationRequest(parts=(TextPart(text),))

    parts: tuple[GenerationPart, ...] = (
        TextPart(text),
        BlobPart.from_bytes(attachment.data, attachment.media_type or DEFAULT_MEDIA_TYPE),
    )
    return GenerationRequest(parts=parts)
