"""Abstract interface for text-to-speech operations."""

from abc import ABC, abstractmethod
from typing import Any

from travel_assistant.domain.models import SynthesisOptions, SynthesisResult


class SpeechSynthesizer(ABC):
    """Abstract base class for speech synthesis backends."""

    @abstractmethod
    def synthesize(self, text: str, options: SynthesisOptions) -> SynthesisResult:
        """
        Converts text to speech.

        Args:
            text: Non-empty text to speak.
            options: Voice and audio settings.

        Returns:
            SynthesisResult naming the voice actually used.

        Raises:
            SynthesisError: If synthesis is unavailable or fails.
        """
        pass

    @abstractmethod
    def list_voices(self, language_code: str | None = None) -> list[dict[str, Any]]:
        """
        Lists the provider's voices, optionally filtered by language.

        Raises:
            SynthesisError: If the voice list cannot be fetched.
        """
        pass
