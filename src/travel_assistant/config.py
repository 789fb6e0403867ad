"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, computed_field

DEFAULT_RECOGNITION_LANGUAGES = (
    "en-US",
    "zh-CN",
    "zh-TW",
    "es-ES",
    "fr-FR",
    "de-DE",
    "ja-JP",
    "ko-KR",
    "ar-SA",
    "hi-IN",
    "th-TH",
    "vi-VN",
    "it-IT",
    "pt-BR",
    "ru-RU",
    "nl-NL",
)


class FlowiseConfig(BaseModel, frozen=True):
    """Flowise conversational-AI configuration."""

    api_url: str = "https://cloud.flowiseai.com"
    api_key: str = ""
    timeout_seconds: float = 30.0
    image_timeout_seconds: float = 120.0
    default_translation_chatflow_id: str | None = None
    default_price_advisor_chatflow_id: str | None = None
    currency_chatflow_id: str | None = None


class SpeechToTextConfig(BaseModel, frozen=True):
    """Google Speech-to-Text configuration."""

    endpoint: str = "https://speech.googleapis.com/v1/speech:recognize"
    api_key: str | None = None
    credentials_path: str | None = None
    default_language_code: str = "en-US"
    alternative_language_codes: tuple[str, ...] = DEFAULT_RECOGNITION_LANGUAGES
    timeout_seconds: float = 60.0


class TextToSpeechConfig(BaseModel, frozen=True):
    """Google Text-to-Speech configuration."""

    api_key: str | None = None
    credentials_path: str | None = None
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def is_configured(self) -> bool:
        """True when at least one credential mechanism is available."""
        return bool(self.api_key or self.credentials_path)


class MapsConfig(BaseModel, frozen=True):
    """Google Maps configuration for transportation queries."""

    api_key: str = ""
    base_url: str = "https://maps.googleapis.com/maps/api"
    use_mock: bool = False
    timeout_seconds: float = 15.0


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    environment: str = "development"
    frontend_origins: tuple[str, ...] = ()
    audio_output_dir: Path = Path("audio-output")

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Origins allowed by CORS; everything outside production."""
        if self.environment != "production":
            return ["*"]
        return list(self.frontend_origins)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    flowise: FlowiseConfig
    speech_to_text: SpeechToTextConfig
    text_to_speech: TextToSpeechConfig
    maps: MapsConfig
    server: ServerConfig


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    credentials_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None
    return AppConfig(
        flowise=FlowiseConfig(
            api_url=os.getenv("FLOWISE_API_URL", "https://cloud.flowiseai.com"),
            api_key=os.getenv("FLOWISE_API_KEY", ""),
            default_translation_chatflow_id=os.getenv("DEFAULT_TRANSLATION_CHATFLOW_ID")
            or None,
            default_price_advisor_chatflow_id=os.getenv(
                "DEFAULT_PRICE_ADVISOR_CHATFLOW_ID"
            )
            or None,
            currency_chatflow_id=os.getenv("CURRENCY_CHATFLOW_ID") or None,
        ),
        speech_to_text=SpeechToTextConfig(
            api_key=os.getenv("GOOGLE_SPEECH_API_KEY") or None,
            credentials_path=credentials_path,
            default_language_code=os.getenv("GOOGLE_SPEECH_LANGUAGE_CODE", "en-US"),
        ),
        text_to_speech=TextToSpeechConfig(
            api_key=os.getenv("GOOGLE_API_KEY") or None,
            credentials_path=credentials_path,
        ),
        maps=MapsConfig(
            api_key=os.getenv("GOOGLE_MAPS_API_KEY", ""),
            use_mock=os.getenv("TRANSPORTATION_USE_MOCK", "false").lower() == "true",
        ),
        server=ServerConfig(
            environment=os.getenv("API_ENV", "development"),
            frontend_origins=_split_csv(os.getenv("FRONTEND_ORIGINS", "")),
            audio_output_dir=Path(os.getenv("AUDIO_OUTPUT_DIR", "audio-output")),
        ),
    )
