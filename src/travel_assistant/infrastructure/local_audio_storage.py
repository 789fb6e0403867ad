"""Local-disk implementation of the AudioStorage interface."""

import uuid
from pathlib import Path

from travel_assistant.domain.models import AudioFormat, StoredAudio
from travel_assistant.exceptions import StorageUploadError
from travel_assistant.logging import setup_logging

from .interfaces import AudioStorage

logger = setup_logging()


class LocalAudioStorage(AudioStorage):
    """Writes synthesized audio into a directory on local disk."""

    def __init__(self, output_dir: Path):
        self._output_dir = output_dir

    def save(self, audio: bytes, audio_format: AudioFormat) -> StoredAudio:
        filename = f"{uuid.uuid4()}.{audio_format}"
        file_path = self._output_dir / filename
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(audio)
        except OSError as e:
            logger.exception("Saving audio file failed", extra={"file_name": filename})
            raise StorageUploadError(filename, e) from e

        logger.info(
            "Audio file saved",
            extra={"file_name": filename, "size": len(audio)},
        )
        return StoredAudio(file_path=str(file_path), filename=filename, size=len(audio))
