"""Domain models for the travel assistant pipelines."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

AudioFormat = Literal["mp3", "wav", "ogg", "flac"]
SsmlGender = Literal["NEUTRAL", "FEMALE", "MALE"]


class PipelineStage(str, Enum):
    RECEIVED = "Received"
    TRANSCRIBING = "Transcribing"
    TRANSLATING = "Translating"
    SYNTHESIZING = "Synthesizing"
    COMPLETED = "Completed"
    COMPLETED_WITH_WARNING = "CompletedWithWarning"
    ABORTED = "Aborted"


class ChatTurn(BaseModel, frozen=True):
    """A prior conversation turn in Flowise's history format."""

    role: Literal["userMessage", "apiMessage"]
    content: str

    @classmethod
    def from_speaker(cls, speaker: str, content: str) -> "ChatTurn":
        """Maps a client-side speaker label (user/assistant/ai) to a Flowise role."""
        role = "userMessage" if speaker == "user" else "apiMessage"
        return cls(role=role, content=content)


class ConversationReply(BaseModel, frozen=True):
    """Raw provider payload plus the best-effort extracted answer."""

    data: dict[str, Any]
    answer: str | None = None


class TranscriptionResult(BaseModel, frozen=True):
    text: str
    language_hint: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)


class TranslationResult(BaseModel, frozen=True):
    original_text: str
    translated_text: str
    source_language: str = "auto"
    target_language: str = "auto"


class SynthesisOptions(BaseModel, frozen=True):
    """Voice and audio settings for a synthesis request."""

    language_code: str = "en-US"
    voice_name: str | None = None
    audio_format: AudioFormat = "mp3"
    speaking_rate: float = Field(default=1.0, ge=0.25, le=4.0)
    pitch: float = Field(default=0.0, ge=-20.0, le=20.0)
    volume_gain_db: float = Field(default=0.0, ge=-96.0, le=16.0)
    ssml_gender: SsmlGender = "NEUTRAL"


class SynthesisResult(BaseModel, frozen=True):
    """Synthesized audio; voice_name is the voice actually used."""

    audio_content: bytes
    audio_format: AudioFormat
    language_code: str
    voice_name: str
    requested_voice_name: str

    @property
    def voice_substituted(self) -> bool:
        return self.voice_name != self.requested_voice_name


class PipelineOutcome(BaseModel, frozen=True):
    """
    Aggregated result of an audio or text translation run.

    Only the synthesis stage may degrade to a warning; any other stage
    failure aborts the run instead of producing an outcome.
    """

    stage: PipelineStage
    translation: TranslationResult
    transcription: TranscriptionResult | None = None
    synthesis: SynthesisResult | None = None
    warnings: tuple[str, ...] = ()


class AudioTranslationRequest(BaseModel, frozen=True):
    """Input of the audio → text → translated speech pipeline."""

    audio: bytes
    mime_type: str | None = None
    chatflow_id: str | None = None
    source_language: str = "auto"
    target_language: str = "auto"
    recognition_language_code: str | None = None
    recognition_language_codes: tuple[str, ...] | None = None
    synthesis: SynthesisOptions | None = None
    synthesize_speech: bool = True


class TextTranslationRequest(BaseModel, frozen=True):
    """Input of the translate-and-speak flow, which starts at translation."""

    text: str
    chatflow_id: str | None = None
    source_language: str = "auto"
    target_language: str = "auto"
    history: tuple[ChatTurn, ...] = ()
    synthesis: SynthesisOptions | None = None
    synthesize_speech: bool = True


class ImageTranslation(BaseModel, frozen=True):
    original_text: str
    translated_text: str
    detected_language: str
    description: str = ""


class StoredAudio(BaseModel, frozen=True):
    file_path: str
    filename: str
    size: int
