"""Async client for the Gemini generateContent REST endpoint."""
from __future__ import annotations
import logging
import time
from typing import Any, Protocol

import httpx

from genai_gateway.common.config import Settings
from genai_gateway.common.errors import ProviderError
from genai_gateway.common.schema import GenerationRequest

LOGGER = logging.getLogger("genai_gateway.providers.gemini")


class GenerationProvider(Protocol):
    async def generate(self, request: GenerationRequest) -> Any: ...

    async def aclose(self) -> None: ...


def _error_message(response: httpx.Response) -> str:
    """Best-effort upstream error text for a failed call."""
    try:
        payload = response.json()
    except ValueError:
        return f"Gemini returned an unexpected error ({response.status_code})"

    error_obj = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error_obj, dict) and error_obj.get("message"):
        return str(error_obj["message"])
    return f"Gemini returned an unexpected error ({response.status_code})"


class GeminiClient:
    """Holds one AsyncClient for the life of the process; safe to share across requests."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._http = http_client or httpx.AsyncClient(timeout=settings.timeout_s)

    @property
    def model(self) -> str:
        return self._settings.model

    @property
    def url(self) -> str:
        return f"{self._settings.base_url}/v1beta/models/{self._settings.model}:generateContent"

    async def generate(self, request: GenerationRequest) -> Any:
        """
        Send one generateContent call and return the decoded JSON body.

        Raises:
            ProviderError: Missing API key, transport failure, non-2xx status
                or a body that is not JSON.
        """
        if not self._settings.api_key:
            raise ProviderError("GOOGLE_AI_STUDIO_API_KEY is not set")

        headers = {"x-goog-api-key": self._settings.api_key}
        start = time.time()
        try:
            r = await self._http.post(self.url, headers=headers, json=request.to_payload())
        except httpx.HTTPError as e:
            LOGGER.error("Gemini request failed: %s", e)
            raise ProviderError(f"Gemini request failed: {e}") from e

        latency = int((time.time() - start) * 1000)
        if r.status_code >= 400:
            message = _error_message(r)
            LOGGER.error("Gemini returned %s after %sms: %s", r.status_code, latency, message)
            raise ProviderError(message, status_code=r.status_code)

        LOGGER.info("Gemini %s answered in %sms", self._settings.model, latency)
        try:
            return r.json()
        except ValueError as e:
            raise ProviderError("Malformed Gemini response") from e

    async def aclose(self) -> None:
        await self._http.aclose()
