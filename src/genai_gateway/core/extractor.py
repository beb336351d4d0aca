"""Pull generated text out of a provider response of unknown shape.

Candidate paths are tried in order; the first one that resolves to a non-null
value wins. When nothing matches, or probing blows up, the whole response is
pretty-printed as JSON so the caller always gets a string back.
"""
from __future__ import annotations
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

LOGGER = logging.getLogger("genai_gateway.core.extractor")

PathKey = str | int

TEXT_PATHS: tuple[tuple[PathKey, ...], ...] = (
    ("response", "candidates", 0, "content", "parts", 0, "text"),
    ("candidates", 0, "content", "parts", 0, "text"),
    ("response", "candidates", 0, "content", "text"),
)

_MISSING = object()


def _lookup(node: Any, key: PathKey) -> Any:
    if isinstance(key, int):
        if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            if -len(node) <= key < len(node):
                return node[key]
        return _MISSING
    if isinstance(node, Mapping):
        return node.get(key, _MISSING)
    return _MISSING


def resolve_path(data: Any, path: Sequence[PathKey]) -> Any:
    """Walk ``path`` through nested mappings/sequences; None when it breaks off."""
    node = data
    for key in path:
        node = _lookup(node, key)
        if node is _MISSING or node is None:
            return None
    return node


def dump_response(data: Any) -> str:
    """Human-readable serialization of an arbitrary response."""
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError) as e:
        LOGGER.warning("Response is not JSON-serializable (%s); using repr", e)
        return repr(data)


def extract_generated_text(
    data: Any, paths: Sequence[Sequence[PathKey]] = TEXT_PATHS
) -> str:
    """
    Return the first generated text found in ``data``.

    Args:
        data: Decoded provider response.
        paths: Candidate paths in priority order.

    Returns:
        The text at the first resolving path, else a pretty-printed dump of
        ``data``. Never raises.
    """
    try:
        for path in paths:
            value = resolve_path(data, path)
            if value is not None:
                return value if isinstance(value, str) else dump_response(value)
    except Exception:
        LOGGER.exception("Failed to read generated text from response")
        return dump_response(data)

    LOGGER.warning("No generated text found in response; returning raw payload")
    return dump_response(data)
