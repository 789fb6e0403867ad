"""Domain layer exports."""

from .models import (
    AudioTranslationRequest,
    ChatTurn,
    ConversationReply,
    ImageTranslation,
    PipelineOutcome,
    PipelineStage,
    StoredAudio,
    SynthesisOptions,
    SynthesisResult,
    TextTranslationRequest,
    TranscriptionResult,
    TranslationResult,
)
from .response_normalizer import (
    extract_answer,
    extract_json_object,
    normalize_image_translation,
    parse_currency_conversion,
    parse_structured_answer,
)

__all__ = [
    "AudioTranslationRequest",
    "ChatTurn",
    "ConversationReply",
    "ImageTranslation",
    "PipelineOutcome",
    "PipelineStage",
    "StoredAudio",
    "SynthesisOptions",
    "SynthesisResult",
    "TextTranslationRequest",
    "TranscriptionResult",
    "TranslationResult",
    "extract_answer",
    "extract_json_object",
    "normalize_image_translation",
    "parse_currency_conversion",
    "parse_structured_answer",
]
