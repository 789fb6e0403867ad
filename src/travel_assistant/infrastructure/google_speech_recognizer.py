"""Google Speech-to-Text REST implementation of the SpeechRecognizer interface."""

import base64
from typing import Any

import httpx
from google.auth.exceptions import GoogleAuthError

from travel_assistant.config import SpeechToTextConfig
from travel_assistant.domain.models import TranscriptionResult
from travel_assistant.exceptions import TranscriptionError, TranscriptionFailure
from travel_assistant.logging import setup_logging

from .interfaces import SpeechRecognizer

logger = setup_logging()

DEFAULT_MIME_TYPE = "audio/webm"

# Checked in order: "amr-wb" before "amr", "webm" before "opus".
_ENCODINGS = (
    ("wav", "LINEAR16"),
    ("flac", "FLAC"),
    ("amr-wb", "AMR_WB"),
    ("amr", "AMR"),
    ("webm", "WEBM_OPUS"),
    ("ogg", "OGG_OPUS"),
    ("opus", "OGG_OPUS"),
    ("mp3", "MP3"),
    ("mpeg", "MP3"),
)


def encoding_for(mime_type: str) -> str | None:
    """Provider encoding for a MIME type; None lets the provider auto-detect."""
    lowered = mime_type.lower()
    for marker, encoding in _ENCODINGS:
        if marker in lowered:
            return encoding
    return None


def _is_opus_container(mime_type: str) -> bool:
    lowered = mime_type.lower()
    return any(marker in lowered for marker in ("webm", "ogg", "opus"))


def _provider_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"HTTP {response.status_code}"


class GoogleSpeechRecognizer(SpeechRecognizer):
    """Handles speech recognition using the Google Speech-to-Text v1 API."""

    def __init__(
        self,
        client: httpx.Client,
        config: SpeechToTextConfig,
        auth: httpx.Auth | None,
    ):
        self._client = client
        self._config = config
        self._auth = auth

    def build_request_body(
        self,
        audio: bytes,
        mime_type: str,
        language_code: str,
        alternative_language_codes: tuple[str, ...],
    ) -> dict[str, Any]:
        recognition_config: dict[str, Any] = {
            "languageCode": language_code,
            "alternativeLanguageCodes": list(alternative_language_codes),
            "enableAutomaticPunctuation": True,
        }
        encoding = encoding_for(mime_type)
        if encoding:
            recognition_config["encoding"] = encoding
        if _is_opus_container(mime_type):
            recognition_config["audioChannelCount"] = 2
        return {
            "config": recognition_config,
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
        }

    def transcribe(
        self,
        audio: bytes,
        mime_type: str | None = None,
        language_code: str | None = None,
        alternative_language_codes: tuple[str, ...] | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes audio with a single recognize call.

        The best alternative of every result is joined with spaces.
        """
        if self._auth is None:
            raise TranscriptionError(
                TranscriptionFailure.AUTH_UNAVAILABLE,
                "No Google auth available. Set GOOGLE_APPLICATION_CREDENTIALS "
                "or GOOGLE_SPEECH_API_KEY.",
            )

        mime_type = mime_type or DEFAULT_MIME_TYPE
        body = self.build_request_body(
            audio,
            mime_type,
            language_code or self._config.default_language_code,
            alternative_language_codes or self._config.alternative_language_codes,
        )

        try:
            response = self._client.post(
                self._config.endpoint,
                json=body,
                auth=self._auth,
                timeout=self._config.timeout_seconds,
            )
        except GoogleAuthError as e:
            logger.exception("Google credentials unavailable for speech recognition")
            raise TranscriptionError(
                TranscriptionFailure.AUTH_UNAVAILABLE, str(e), cause=e
            ) from e
        except httpx.HTTPError as e:
            logger.exception("Google STT request failed")
            raise TranscriptionError(
                TranscriptionFailure.PROVIDER_ERROR, str(e) or type(e).__name__, cause=e
            ) from e

        if response.is_error:
            message = _provider_message(response)
            logger.error(
                "Google STT returned an error",
                extra={"status_code": response.status_code, "error": message},
            )
            raise TranscriptionError(TranscriptionFailure.PROVIDER_ERROR, message)

        try:
            payload = response.json()
            transcript = " ".join(
                alternatives[0]["transcript"]
                for result in payload.get("results", [])
                if (alternatives := result.get("alternatives"))
                and alternatives[0].get("transcript")
            ).strip()
        except (ValueError, AttributeError, KeyError, TypeError) as e:
            logger.exception("Google STT returned an unreadable response")
            raise TranscriptionError(
                TranscriptionFailure.PROVIDER_ERROR,
                "Google STT returned an invalid response",
                cause=e,
            ) from e

        if not transcript:
            raise TranscriptionError(
                TranscriptionFailure.EMPTY_TRANSCRIPT,
                "No transcription result from Google STT",
            )

        language_hint = next(
            (
                result["languageCode"]
                for result in payload.get("results", [])
                if result.get("languageCode")
            ),
            None,
        )
        logger.info(
            "Audio transcription successful",
            extra={"characters": len(transcript), "language_hint": language_hint},
        )
        return TranscriptionResult(text=transcript, language_hint=language_hint, raw=payload)
