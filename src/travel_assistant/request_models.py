"""Request bodies for the travel assistant API."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travel_assistant.domain.models import AudioFormat, ChatTurn, SsmlGender


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys as well as field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HistoryMessage(CamelModel):
    message: str = Field(min_length=1)
    type: Literal["user", "assistant"]

    def to_turn(self) -> ChatTurn:
        return ChatTurn.from_speaker(self.type, self.message)


class ChatHistoryEntry(CamelModel):
    role: Literal["user", "ai", "assistant"]
    text: str | None = None
    content: str | None = None

    def to_turn(self) -> ChatTurn:
        return ChatTurn.from_speaker(self.role, self.text or self.content or "")


def to_turns(entries: list[HistoryMessage] | list[ChatHistoryEntry]) -> tuple[ChatTurn, ...]:
    return tuple(entry.to_turn() for entry in entries)


class VoiceSettings(CamelModel):
    """Speech settings shared by the synthesis endpoints."""

    language_code: str | None = Field(default=None, min_length=2, max_length=20)
    voice_name: str | None = None
    audio_format: AudioFormat = "mp3"
    speaking_rate: float = Field(default=1.0, ge=0.25, le=4.0)
    pitch: float = Field(default=0.0, ge=-20.0, le=20.0)
    volume_gain_db: float = Field(default=0.0, ge=-96.0, le=16.0)
    ssml_gender: SsmlGender = "NEUTRAL"


class TextTranslationBody(CamelModel):
    message: str = Field(min_length=1, max_length=5000)
    chatflow_id: str | None = None
    source_language: str = Field(default="auto", min_length=2, max_length=10)
    target_language: str = Field(default="auto", min_length=2, max_length=10)
    history: list[HistoryMessage] = Field(default_factory=list)


class TextToSpeechBody(VoiceSettings):
    text: str = Field(min_length=1, max_length=5000)
    save_to_file: bool = False
    return_audio: bool = True


class TranslateAndSpeakBody(VoiceSettings):
    message: str = Field(min_length=1, max_length=5000)
    chatflow_id: str | None = None
    source_language: str = Field(default="auto", min_length=2, max_length=10)
    target_language: str = Field(default="auto", min_length=2, max_length=10)
    history: list[HistoryMessage] = Field(default_factory=list)


class PersonalizedRecommendationsBody(CamelModel):
    user_message: str = Field(min_length=1, max_length=1000)
    chatflow_id: str = Field(min_length=1)
    chat_history: list[ChatHistoryEntry] = Field(default_factory=list)


class CulturalEtiquetteBody(CamelModel):
    location: str = Field(min_length=2, max_length=100)
    chatflow_id: str = Field(min_length=1)
    specific_topics: list[str] = Field(default_factory=list)


class ComprehensiveRecommendationsBody(CamelModel):
    location: str = Field(min_length=2, max_length=100)
    interests: list[str] = Field(default_factory=list)
    budget: Literal["low", "medium", "high", "luxury"] = "medium"
    preferences: dict[str, Any] = Field(default_factory=dict)
    duration: str = Field(default="1 week", min_length=3, max_length=50)
    travel_style: Literal[
        "backpacker", "family", "business", "luxury", "tourist", "adventure"
    ] = "tourist"
    dietary_restrictions: list[str] = Field(default_factory=list)
    recommendations_chatflow_id: str = Field(min_length=1)
    cultural_etiquette_chatflow_id: str | None = None
    include_cultural_etiquette: bool = True


class PriceContext(CamelModel):
    market_type: (
        Literal["street", "market", "shop", "restaurant", "hotel", "tour", "transportation"]
        | None
    ) = None
    item_category: (
        Literal[
            "food",
            "souvenir",
            "clothing",
            "electronics",
            "art",
            "jewelry",
            "accommodation",
            "service",
            "other",
        ]
        | None
    ) = None
    seller_type: Literal["local", "tourist", "official", "street", "online"] | None = None
    time_of_day: Literal["morning", "afternoon", "evening", "night"] | None = None
    season: Literal["peak", "off-peak", "holiday"] | None = None


class PriceAdviceBody(CamelModel):
    item: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    location: str | None = Field(default=None, min_length=2, max_length=100)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    chatflow_id: str | None = None
    context: PriceContext | None = None
    history: list[HistoryMessage] = Field(default_factory=list)


class ScamDetectionBody(CamelModel):
    situation: str = Field(min_length=10, max_length=2000)
    location: str | None = Field(default=None, min_length=2, max_length=100)
    chatflow_id: str | None = None
    red_flags: list[str] = Field(default_factory=list)
    urgency: Literal["low", "medium", "high"] = "medium"
    history: list[HistoryMessage] = Field(default_factory=list)


class SafetyAdviceBody(CamelModel):
    query: str = Field(min_length=5, max_length=1000)
    location: str | None = Field(default=None, min_length=2, max_length=100)
    chatflow_id: str | None = None
    advice_type: Literal["price", "safety", "general", "negotiation", "bargaining"] = "general"
    history: list[HistoryMessage] = Field(default_factory=list)


class CurrencyConversionBody(CamelModel):
    amount: float = Field(gt=0)
    from_currency: str = Field(min_length=3, max_length=3)
    to_currency: str = Field(min_length=3, max_length=3)


class ExchangeRatesBody(CamelModel):
    base_currency: str = Field(min_length=3, max_length=3)
    target_currencies: list[str] = Field(default_factory=list)


class TransportationOptionsBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(alias="from", min_length=1, max_length=200)
    destination: str = Field(alias="to", min_length=1, max_length=200)
    mode: Literal["all", "bus", "metro", "transit"] = "all"
    preferences: dict[str, Any] = Field(default_factory=dict)


class DirectionsBody(CamelModel):
    origin: str = Field(alias="from", min_length=1, max_length=200)
    destination: str = Field(alias="to", min_length=1, max_length=200)
    transport_type: Literal["bus", "metro"]
    route_id: str | None = None


class LocationTrackingBody(CamelModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy: float = Field(default=10, ge=0)
    timestamp: datetime | None = None
