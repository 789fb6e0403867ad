"""Abstract interface for synthesized-audio storage."""

from abc import ABC, abstractmethod

from travel_assistant.domain.models import AudioFormat, StoredAudio


class AudioStorage(ABC):
    """Abstract base class for audio file storage."""

    @abstractmethod
    def save(self, audio: bytes, audio_format: AudioFormat) -> StoredAudio:
        """
        Stores an audio clip under a unique name.

        Args:
            audio: Encoded audio bytes.
            audio_format: Encoding, used as the file extension.

        Returns:
            StoredAudio describing the written file.

        Raises:
            StorageUploadError: If the write fails.
        """
        pass
