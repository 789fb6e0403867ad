"""Abstract interface for speech-to-text operations."""

from abc import ABC, abstractmethod

from travel_assistant.domain.models import TranscriptionResult


class SpeechRecognizer(ABC):
    """Abstract base class for speech recognition backends."""

    @abstractmethod
    def transcribe(
        self,
        audio: bytes,
        mime_type: str | None = None,
        language_code: str | None = None,
        alternative_language_codes: tuple[str, ...] | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes an audio clip.

        Args:
            audio: Raw audio bytes.
            mime_type: Container/codec of the audio. A generic default is
                used when omitted.
            language_code: Primary recognition language.
            alternative_language_codes: Candidate languages for detection.

        Returns:
            TranscriptionResult with a non-empty transcript.

        Raises:
            TranscriptionError: If credentials are missing, the provider
                fails, or no transcript comes back.
        """
        pass
