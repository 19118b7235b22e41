import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import FileResponse, JSONResponse

import code_reviewer.config as config
from code_reviewer.constants import (
    CORS_HEADERS,
    INTERNAL_SERVER_ERROR,
    MISSING_FIELDS_ERROR,
    UNSUPPORTED_REVIEW_TYPE_ERROR,
)
from code_reviewer.models import AnalysisResult, ErrorResponse, ReviewType
from code_reviewer.prompts import build_prompt
from code_reviewer.providers import (
    PROVIDER_MAP,
    ProviderError,
    ProviderNotConfiguredError,
    UnsupportedProviderError,
    get_provider,
)

STATIC_DIR = Path(__file__).parent / "static"


def get_settings():
    # Not cached: credentials are read on every request
    return config.Settings()


def load_settings() -> Optional[config.Settings]:
    try:
        return get_settings()
    except Exception as e:
        logging.error(f"Failed to load settings: {e}")
        return None


logging.basicConfig(level=get_settings().LOG_LEVEL.upper())

app = FastAPI(
    title="AI Code Reviewer API",
    description="Forwards source code and a review prompt to an LLM provider and returns its analysis.",
    version="1.0.0",
)


def json_response(content: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response(ErrorResponse(error=message).model_dump(), status_code)


@app.get("/", tags=["Client"])
async def index():
    return FileResponse(path=STATIC_DIR / "index.html", media_type="text/html")


@app.get("/health", tags=["Health"])
async def health(settings: Optional[config.Settings] = Depends(load_settings)):
    if settings is None:
        return {
            "status": "error",
            "provider": None,
            "configured": False,
            "supported_providers": list(PROVIDER_MAP),
        }

    provider_name = settings.LLM_PROVIDER.strip().lower()
    try:
        get_provider(settings)
        configured = True
    except (ProviderNotConfiguredError, UnsupportedProviderError):
        configured = False

    return {
        "status": "ok",
        "provider": provider_name,
        "configured": configured,
        "supported_providers": list(PROVIDER_MAP),
    }


@app.options("/analyze-code", tags=["Analysis"])
async def analyze_code_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@app.post("/analyze-code", tags=["Analysis"])
async def analyze_code(request: Request, settings: Optional[config.Settings] = Depends(load_settings)):
    try:
        if settings is None:
            return error_response(INTERNAL_SERVER_ERROR, 500)

        payload = await request.json()
        if not isinstance(payload, dict):
            payload = {}

        code = payload.get("code")
        review_type = payload.get("reviewType")

        if not code or not review_type:
            return error_response(MISSING_FIELDS_ERROR, 400)

        if settings.STRICT_REVIEW_TYPES and not ReviewType.is_known(review_type):
            logging.warning(f"Rejected unsupported review type: {review_type}")
            return error_response(UNSUPPORTED_REVIEW_TYPE_ERROR, 400)

        try:
            provider = get_provider(settings)
        except (ProviderNotConfiguredError, UnsupportedProviderError) as e:
            logging.error(f"Provider configuration error: {e}")
            return error_response(str(e), 500)

        prompt = build_prompt(code, review_type)

        logging.info(f"Analyzing code with {review_type} review type using {provider.display_name}")

        try:
            analysis = await provider.complete(prompt)
        except ProviderError as e:
            logging.error(f"{e.provider} API error: {e.detail}")
            return error_response(f"Failed to analyze code with {provider.display_name}", 500)

        logging.info("Code analysis completed successfully")

        result = AnalysisResult(analysis=analysis, reviewType=str(review_type))
        return json_response(result.model_dump())

    except Exception as e:
        logging.error(f"Error in analyze-code endpoint: {e}")
        return error_response(INTERNAL_SERVER_ERROR, 500)
