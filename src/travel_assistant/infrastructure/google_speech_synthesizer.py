"""Google Cloud Text-to-Speech implementation of the SpeechSynthesizer interface."""

from typing import Any

from google.api_core import exceptions as google_exceptions
from google.auth.exceptions import GoogleAuthError, TransportError
from google.cloud import texttospeech

from travel_assistant.domain.models import SynthesisOptions, SynthesisResult
from travel_assistant.domain.voices import (
    basic_voice_for,
    default_voice_for,
    standard_tier_voice,
)
from travel_assistant.exceptions import SynthesisError, SynthesisFailure
from travel_assistant.logging import setup_logging

from .interfaces import SpeechSynthesizer

logger = setup_logging()

AUDIO_ENCODINGS = {
    "mp3": "MP3",
    "wav": "LINEAR16",
    "ogg": "OGG_OPUS",
    "flac": "FLAC",
}

NOT_CONFIGURED_MESSAGE = (
    "Google Cloud Text-to-Speech credentials not configured. "
    "Set GOOGLE_API_KEY or GOOGLE_APPLICATION_CREDENTIALS."
)


def voice_candidates(requested: str, language_code: str) -> list[str]:
    """
    Voices to try, in order, for one synthesis request.

    The requested voice first, then its Standard-tier variant, then the
    basic voice built from the language code. Duplicates are dropped, so
    the chain holds at most two fallbacks.
    """
    candidates = [requested]
    for fallback in (standard_tier_voice(requested), basic_voice_for(language_code)):
        if fallback not in candidates:
            candidates.append(fallback)
    return candidates


def _is_missing_voice(error: Exception) -> bool:
    return isinstance(error, google_exceptions.InvalidArgument) and "does not exist" in str(
        error
    )


def _to_synthesis_error(error: Exception) -> SynthesisError:
    if isinstance(error, google_exceptions.PermissionDenied):
        return SynthesisError(
            SynthesisFailure.PERMISSION_DENIED,
            "Check your Google Cloud credentials and permissions for Text-to-Speech API",
            cause=error,
        )
    if isinstance(error, google_exceptions.InvalidArgument):
        return SynthesisError(
            SynthesisFailure.INVALID_ARGUMENT,
            "Invalid language code, voice name, or audio format",
            cause=error,
        )
    if isinstance(error, google_exceptions.ResourceExhausted):
        return SynthesisError(
            SynthesisFailure.QUOTA_EXCEEDED,
            "Text-to-Speech API quota exceeded",
            cause=error,
        )
    if isinstance(error, GoogleAuthError) and not isinstance(error, TransportError):
        return SynthesisError(
            SynthesisFailure.SERVICE_UNAVAILABLE, NOT_CONFIGURED_MESSAGE, cause=error
        )
    return SynthesisError(
        SynthesisFailure.SYNTHESIS_FAILED,
        str(error) or "Unknown error occurred during speech synthesis",
        cause=error,
    )


class GoogleSpeechSynthesizer(SpeechSynthesizer):
    """Handles speech synthesis using Google Cloud Text-to-Speech."""

    def __init__(
        self,
        client: texttospeech.TextToSpeechClient | None,
        timeout_seconds: float = 30.0,
    ):
        self._client = client
        self._timeout = timeout_seconds

    def synthesize(self, text: str, options: SynthesisOptions) -> SynthesisResult:
        """
        Synthesizes text, walking the voice fallback chain when the
        requested voice does not exist.

        Any error other than a missing voice ends the chain immediately.
        """
        client = self._require_client()
        if not text or not text.strip():
            raise SynthesisError(
                SynthesisFailure.INVALID_ARGUMENT, "Text is required for speech synthesis"
            )

        try:
            audio_encoding = texttospeech.AudioEncoding[AUDIO_ENCODINGS[options.audio_format]]
        except KeyError as e:
            raise SynthesisError(
                SynthesisFailure.INVALID_ARGUMENT,
                f"Unsupported audio format: {options.audio_format}",
                cause=e,
            ) from e

        requested_voice = options.voice_name or default_voice_for(options.language_code)
        synthesis_input = texttospeech.SynthesisInput(text=text)
        audio_config = texttospeech.AudioConfig(
            audio_encoding=audio_encoding,
            speaking_rate=options.speaking_rate,
            pitch=options.pitch,
            volume_gain_db=options.volume_gain_db,
        )

        last_error: Exception | None = None
        for voice_name in voice_candidates(requested_voice, options.language_code):
            voice = texttospeech.VoiceSelectionParams(
                language_code=options.language_code,
                name=voice_name,
                ssml_gender=texttospeech.SsmlVoiceGender[options.ssml_gender],
            )
            try:
                response = client.synthesize_speech(
                    input=synthesis_input,
                    voice=voice,
                    audio_config=audio_config,
                    timeout=self._timeout,
                )
            except (google_exceptions.GoogleAPIError, GoogleAuthError) as e:
                if not _is_missing_voice(e):
                    logger.exception(
                        "Text-to-speech synthesis failed", extra={"voice_name": voice_name}
                    )
                    raise _to_synthesis_error(e) from e
                logger.warning(
                    "Voice not available, trying fallback",
                    extra={"voice_name": voice_name},
                )
                last_error = e
                continue

            if voice_name != requested_voice:
                logger.info(
                    "Fallback voice used",
                    extra={"requested_voice": requested_voice, "voice_name": voice_name},
                )
            return SynthesisResult(
                audio_content=response.audio_content,
                audio_format=options.audio_format,
                language_code=options.language_code,
                voice_name=voice_name,
                requested_voice_name=requested_voice,
            )

        logger.error(
            "No usable voice for language",
            extra={"language_code": options.language_code, "requested_voice": requested_voice},
        )
        raise _to_synthesis_error(last_error) from last_error

    def list_voices(self, language_code: str | None = None) -> list[dict[str, Any]]:
        client = self._require_client()
        try:
            response = client.list_voices(language_code=language_code, timeout=self._timeout)
        except (google_exceptions.GoogleAPIError, GoogleAuthError) as e:
            logger.exception("Listing voices failed", extra={"language_code": language_code})
            raise _to_synthesis_error(e) from e

        return [
            {
                "name": voice.name,
                "languageCodes": list(voice.language_codes),
                "ssmlGender": texttospeech.SsmlVoiceGender(voice.ssml_gender).name,
                "naturalSampleRateHertz": voice.natural_sample_rate_hertz,
            }
            for voice in response.voices
        ]

    def _require_client(self) -> texttospeech.TextToSpeechClient:
        if self._client is None:
            raise SynthesisError(SynthesisFailure.SERVICE_UNAVAILABLE, NOT_CONFIGURED_MESSAGE)
        return self._client
