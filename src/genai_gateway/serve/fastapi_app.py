"""FastAPI gateway in front of the Gemini generateContent API.

Endpoints:
- GET  /                          HTML status page
- GET  /health
- POST /generate-text             { "prompt": "..." }
- POST /generate-from-image       multipart: image, prompt
- POST /generate-from-document    multipart: document, prompt (optional)
- POST /generate-from-audio       multipart: audio, prompt (optional)
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from genai_gateway.common.config import Settings
from genai_gateway.common.errors import ValidationError
from genai_gateway.common.logging_setup import setup_logging
from genai_gateway.common.schema import (
    DEFAULT_MEDIA_TYPE,
    Attachment,
    ErrorOut,
    GenerateOut,
    GenerateTextIn,
    GenerationRequest,
)
from genai_gateway.common.templates import (
    DEFAULT_AUDIO_PROMPT,
    DEFAULT_DOCUMENT_PROMPT,
    render_status_page,
)
from genai_gateway.core.extractor import extract_generated_text
from genai_gateway.core.normalizer import normalize_request
from genai_gateway.providers.gemini import GeminiClient, GenerationProvider

LOGGER = logging.getLogger("genai_gateway.serve.app")

GENERATION_ENDPOINTS = (
    "/generate-text",
    "/generate-from-image",
    "/generate-from-document",
    "/generate-from-audio",
)

ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}


async def _read_upload(upload: UploadFile | None) -> Attachment | None:
    if upload is None:
        return None
    data = await upload.read()
    return Attachment(
        data=data,
        media_type=upload.content_type or DEFAULT_MEDIA_TYPE,
        filename=upload.filename,
    )


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    LOGGER.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"message": str(exc)})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    LOGGER.info("Rejected %s: %s", request.url.path, details)
    return JSONResponse(status_code=400, content={"message": details or "invalid request"})


def create_app(settings: Settings | None = None, provider: GenerationProvider | None = None) -> FastAPI:
    """
    Build the gateway application.

    Args:
        settings: Process configuration; read from the environment when omitted.
        provider: Generation backend; a GeminiClient for ``settings`` when omitted.
    """
    settings = settings or Settings.from_env()
    provider = provider or GeminiClient(settings)

    app = FastAPI(title="genai-gateway")
    app.state.settings = settings
    app.state.provider = provider
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    @app.on_event("startup")
    def _log_configuration() -> None:
        """Warn early when the provider cannot be called."""
        if not settings.api_key:
            LOGGER.warning("GOOGLE_AI_STUDIO_API_KEY is not set; generation calls will fail")
        LOGGER.info("Serving model %s", settings.model)

    @app.on_event("shutdown")
    async def _close_provider() -> None:
        await provider.aclose()

    async def _generate(path: str, request: GenerationRequest) -> GenerateOut | JSONResponse:
        try:
            data = await provider.generate(request)
            return GenerateOut(result=extract_generated_text(data))
        except Exception as e:
            LOGGER.error("Error in %s: %s", path, e)
            return JSONResponse(status_code=500, content={"message": str(e)})

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return render_status_page(GENERATION_ENDPOINTS)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "model": settings.model}

    @app.post("/generate-text", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_text(body: GenerateTextIn | None = None) -> GenerateOut | JSONResponse:
        request = normalize_request(body.prompt if body else None)
        return await _generate("/generate-text", request)

    @app.post("/generate-from-image", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_image(
        image: UploadFile | None = File(None),
        prompt: str | None = Form(None),
    ) -> GenerateOut | JSONResponse:
        request = normalize_request(
            prompt,
            await _read_upload(image),
            require_attachment=True,
            attachment_kind="image",
        )
        return await _generate("/generate-from-image", request)

    @app.post("/generate-from-document", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_document(
        document: UploadFile | None = File(None),
        prompt: str | None = Form(None),
    ) -> GenerateOut | JSONResponse:
        request = normalize_request(
            prompt,
            await _read_upload(document),
            default_prompt=DEFAULT_DOCUMENT_PROMPT,
            require_attachment=True,
            attachment_kind="document",
        )
        return await _generate("/generate-from-document", request)

    @app.post("/generate-from-audio", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_audio(
        audio: UploadFile | None = File(None),
        prompt: str | None = Form(None),
    ) -> GenerateOut | JSONResponse:
        request = normalize_request(
            prompt,
            await _read_upload(audio),
            default_prompt=DEFAULT_AUDIO_PROMPT,
            require_attachment=True,
            attachment_kind="audio",
        )
        return await _generate("/generate-from-audio", request)

    return app


SETTINGS = Settings.from_env()
setup_logging(SETTINGS.log_level)
app = create_app(SETTINGS)
