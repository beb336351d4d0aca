"""Exception hierarchy mapped to HTTP status codes by the app."""
from __future__ import annotations


class GatewayError(RuntimeError):
    """Base class for errors raised by the gateway."""


class ValidationError(GatewayError):
    """Raised when the caller supplied insufficient input (HTTP 400)."""


class ProviderError(GatewayError):
    """Raised when the generation provider cannot be reached or rejects a call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
