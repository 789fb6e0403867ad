"""FastAPI dependency injection configuration."""

import httpx
from google.auth.exceptions import GoogleAuthError
from google.cloud import texttospeech

from travel_assistant.config import AppConfig, TextToSpeechConfig, load_config
from travel_assistant.handlers import (
    CurrencyHandler,
    ImageTranslationHandler,
    RecommendationsHandler,
    ScamPreventionHandler,
    TranslationPipeline,
)
from travel_assistant.infrastructure import (
    FlowiseClient,
    GoogleMapsDirections,
    GoogleSpeechRecognizer,
    GoogleSpeechSynthesizer,
    LocalAudioStorage,
    MockDirections,
    select_auth,
)
from travel_assistant.infrastructure.interfaces import (
    AudioStorage,
    ConversationService,
    DirectionsProvider,
    SpeechSynthesizer,
)
from travel_assistant.logging import setup_logging

logger = setup_logging()

_config = load_config()


def _build_tts_client(config: TextToSpeechConfig) -> texttospeech.TextToSpeechClient | None:
    if config.api_key:
        return texttospeech.TextToSpeechClient(client_options={"api_key": config.api_key})
    if config.credentials_path:
        try:
            return texttospeech.TextToSpeechClient()
        except GoogleAuthError:
            logger.exception(
                "Text-to-Speech credentials could not be loaded",
                extra={"credentials_path": config.credentials_path},
            )
            return None
    logger.warning("Text-to-Speech is not configured; synthesis requests will fail")
    return None


_flowise_http = httpx.Client(
    base_url=_config.flowise.api_url,
    headers={"X-API-KEY": _config.flowise.api_key} if _config.flowise.api_key else {},
    timeout=_config.flowise.timeout_seconds,
)
_speech_http = httpx.Client(timeout=_config.speech_to_text.timeout_seconds)
_maps_http = httpx.Client(timeout=_config.maps.timeout_seconds)

_speech_auth = select_auth(
    _config.speech_to_text.api_key, _config.speech_to_text.credentials_path
)

_conversation = FlowiseClient(_flowise_http, _config.flowise)
_recognizer = GoogleSpeechRecognizer(_speech_http, _config.speech_to_text, _speech_auth)
_synthesizer = GoogleSpeechSynthesizer(
    _build_tts_client(_config.text_to_speech), _config.text_to_speech.timeout_seconds
)

if _config.maps.use_mock:
    _directions: DirectionsProvider = MockDirections()
    logger.info("Using mock transportation data")
else:
    _directions = GoogleMapsDirections(_maps_http, _config.maps)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_conversation() -> ConversationService:
    """Returns the configured conversational-AI client."""
    return _conversation


def get_synthesizer() -> SpeechSynthesizer:
    """Returns the configured speech synthesizer."""
    return _synthesizer


def get_audio_storage() -> AudioStorage:
    """Returns storage for synthesized audio files."""
    return LocalAudioStorage(_config.server.audio_output_dir)


def get_directions() -> DirectionsProvider:
    """Returns the live or mock transportation provider."""
    return _directions


def get_pipeline() -> TranslationPipeline:
    """Returns the audio/text translation pipeline."""
    return TranslationPipeline(
        _recognizer,
        _conversation,
        _synthesizer,
        default_chatflow_id=_config.flowise.default_translation_chatflow_id,
    )


def get_image_translator() -> ImageTranslationHandler:
    return ImageTranslationHandler(_conversation)


def get_recommendations() -> RecommendationsHandler:
    return RecommendationsHandler(_conversation)


def get_scam_prevention() -> ScamPreventionHandler:
    return ScamPreventionHandler(
        _conversation, _config.flowise.default_price_advisor_chatflow_id
    )


def get_currency() -> CurrencyHandler:
    return CurrencyHandler(_conversation, _config.flowise.currency_chatflow_id)
