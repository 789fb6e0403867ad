"""Response envelopes for the travel assistant API."""

import base64
from typing import Any

from pydantic import BaseModel

from travel_assistant.domain.models import PipelineOutcome, SynthesisResult

AUDIO_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
}


class SuccessResponse(BaseModel):
    """Envelope returned by every successful JSON endpoint."""

    success: bool = True
    data: Any = None
    message: str
    warnings: list[str] | None = None


class ErrorResponse(BaseModel):
    """Envelope returned by every failed request."""

    success: bool = False
    error: str
    message: str
    details: Any = None


def success_response(
    data: Any, message: str, warnings: tuple[str, ...] | list[str] = ()
) -> dict[str, Any]:
    """Builds a success envelope; warnings are omitted when there are none."""
    envelope = SuccessResponse(data=data, message=message, warnings=list(warnings) or None)
    return envelope.model_dump(exclude=set() if warnings else {"warnings"})


def error_response(error: str, message: str, details: Any = None) -> dict[str, Any]:
    envelope = ErrorResponse(error=error, message=message, details=details)
    return envelope.model_dump(exclude=set() if details is not None else {"details"})


def audio_payload(synthesis: SynthesisResult) -> dict[str, Any]:
    """Describes synthesized audio, base64 encoded for JSON transport."""
    return {
        "content": base64.b64encode(synthesis.audio_content).decode("ascii"),
        "format": synthesis.audio_format,
        "mimeType": AUDIO_MIME_TYPES[synthesis.audio_format],
        "size": len(synthesis.audio_content),
        "voiceName": synthesis.voice_name,
        "requestedVoiceName": synthesis.requested_voice_name,
        "voiceSubstituted": synthesis.voice_substituted,
        "languageCode": synthesis.language_code,
    }


def outcome_payload(outcome: PipelineOutcome, timestamp: str) -> dict[str, Any]:
    translation = outcome.translation
    data: dict[str, Any] = {
        "originalText": translation.original_text,
        "translatedText": translation.translated_text,
        "sourceLanguage": translation.source_language,
        "targetLanguage": translation.target_language,
        "stage": outcome.stage.value,
        "timestamp": timestamp,
    }
    if outcome.transcription is not None:
        data["detectedLanguage"] = outcome.transcription.language_hint
    if outcome.synthesis is not None:
        data["audio"] = audio_payload(outcome.synthesis)
    return data
