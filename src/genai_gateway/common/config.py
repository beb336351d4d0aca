"""Process-wide settings read once from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _parse_timeout(raw: str | None) -> float | None:
    if not raw:
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"GEMINI_TIMEOUT_S must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> Settings:
        """
        Build settings from environment variables.

        Args:
            load_dotenv_file: Read a local .env file first (existing variables win).

        Raises:
            ValueError: If PORT or GEMINI_TIMEOUT_S is not numeric, or the
                timeout is not positive.
        """
        if load_dotenv_file:
            load_dotenv()

        api_key = os.getenv("GOOGLE_AI_STUDIO_API_KEY") or os.getenv("GEMINI_API_KEY")
        timeout = os.getenv("GEMINI_TIMEOUT_S")
        return cls(
            api_key=api_key or None,
            model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout_s=_parse_timeout(timeout),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
