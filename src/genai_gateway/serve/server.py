"""Launch the gateway under uvicorn using HOST/PORT from the environment."""
from __future__ import annotations
import argparse
import logging

import uvicorn

from genai_gateway.common.config import Settings
from genai_gateway.common.logging_setup import setup_logging

LOGGER = logging.getLogger("genai_gateway.serve.server")

APP_PATH = "genai_gateway.serve.fastapi_app:app"

def main(argv: list[str] | None = None) -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    ap = argparse.ArgumentParser(description="Run the GenAI HTTP gateway")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = ap.parse_args(argv)

    LOGGER.info("Starting gateway on http://%s:%s", args.host, args.port)
    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
