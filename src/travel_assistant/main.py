"""FastAPI application entry point."""

from datetime import datetime, timezone

from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_assistant.dependencies import get_config
from travel_assistant.exceptions import ApiError
from travel_assistant.logging import setup_logging
from travel_assistant.response_models import error_response, success_response
from travel_assistant.routes import (
    currency_router,
    recommendations_router,
    scam_prevention_router,
    translation_router,
    transportation_router,
)

patch_all()

logger = setup_logging()

API_VERSION = "1.0.0"

app = FastAPI(title="AI Travel Assistant API", version=API_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(translation_router)
app.include_router(transportation_router)
app.include_router(recommendations_router)
app.include_router(scam_prevention_router)
app.include_router(currency_router)


def _validation_message(errors: list[dict]) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    return f"{location}: {first['msg']}" if location else first["msg"]


@app.exception_handler(ApiError)
def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "status_code": exc.status_code, "error": exc.error},
        )
    return JSONResponse(
        status_code=exc.status_code, content=error_response(exc.error, exc.message)
    )


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    return JSONResponse(
        status_code=400,
        content=error_response("Validation error", _validation_message(errors), errors),
    )


@app.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        content = error_response(
            "Endpoint not found",
            f"The requested endpoint {request.url.path} does not exist",
        )
    else:
        content = error_response(str(exc.detail), str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500, content=error_response("Internal server error", str(exc))
    )


@app.get("/")
def index():
    """Lists the API's entry points."""
    return {
        "message": "AI Travel Assistant API",
        "version": API_VERSION,
        "status": "running",
        "endpoints": {
            "translation": "/api/translation",
            "languages": "/api/translation/languages",
            "chatflows": "/api/translation/chatflows",
            "imageTranslation": "/api/translation/image",
            "textToSpeech": "/api/translation/text-to-speech",
            "translateAndSpeak": "/api/translation/translate-and-speak",
            "audioTranslateSpeak": "/api/translation/audio-translate-speak",
            "voices": "/api/translation/voices",
            "ttsLanguages": "/api/translation/tts-languages",
            "transportationOptions": "/api/transportation/options",
            "transportationRealtime": "/api/transportation/realtime",
            "transportationDirections": "/api/transportation/directions",
            "transportationNearby": "/api/transportation/nearby",
            "transportationStatus": "/api/transportation/status",
            "transportationLocationTrack": "/api/transportation/location/track",
            "transportationLocationRealtime": "/api/transportation/location/realtime",
            "transportationLocationNearby": "/api/transportation/location/nearby",
            "personalizedRecommendations": "/api/recommendations/personalized",
            "culturalEtiquette": "/api/recommendations/cultural-etiquette",
            "comprehensiveRecommendations": "/api/recommendations/comprehensive",
            "recommendationsInterests": "/api/recommendations/interests",
            "priceAdvice": "/api/scam-prevention/price-advice",
            "scamDetection": "/api/scam-prevention/detect",
            "safetyAdvice": "/api/scam-prevention/advice",
            "redFlags": "/api/scam-prevention/red-flags",
            "currencyConvert": "/api/currency/convert",
            "currencyExchangeRates": "/api/currency/exchange-rates",
            "currencyInfo": "/api/currency/info/{currency}",
            "currencyMarketInsights": "/api/currency/market-insights",
            "currencySupported": "/api/currency/supported",
        },
    }


@app.get("/health")
def health():
    config = get_config()
    return success_response(
        {
            "status": "healthy",
            "environment": config.server.environment,
            "version": API_VERSION,
            "textToSpeechConfigured": config.text_to_speech.is_configured,
            "transportationMock": config.maps.use_mock,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "AI Travel Assistant API is healthy",
    )
