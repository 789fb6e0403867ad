"""Audio/text translation pipeline: recognize, translate, then speak."""

from travel_assistant.domain.models import (
    AudioTranslationRequest,
    ChatTurn,
    PipelineOutcome,
    PipelineStage,
    SynthesisOptions,
    SynthesisResult,
    TextTranslationRequest,
    TranscriptionResult,
    TranslationResult,
)
from travel_assistant.domain.voices import synthesis_language_for
from travel_assistant.exceptions import (
    ConversationError,
    PipelineAbortedError,
    TranscriptionError,
    TranscriptionFailure,
    UpstreamError,
)
from travel_assistant.infrastructure.interfaces import (
    ConversationService,
    SpeechRecognizer,
    SpeechSynthesizer,
)
from travel_assistant.logging import setup_logging

logger = setup_logging()

MISSING_INPUT = "MissingInput"
SPEECH_WARNING_PREFIX = "Text-to-speech failed: "


class TranslationPipeline:
    """
    Orchestrates speech recognition, translation and speech synthesis.

    Stages run strictly in order and each calls its adapter once.
    Recognition and translation failures abort the run; a synthesis
    failure only adds a warning to an otherwise successful outcome.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        conversation: ConversationService,
        synthesizer: SpeechSynthesizer,
        default_chatflow_id: str | None = None,
    ):
        self._recognizer = recognizer
        self._conversation = conversation
        self._synthesizer = synthesizer
        self._default_chatflow_id = default_chatflow_id

    def run(self, request: AudioTranslationRequest) -> PipelineOutcome:
        """
        Runs the full audio → translated speech pipeline.

        Args:
            request: Audio payload plus translation and voice settings.

        Returns:
            PipelineOutcome in the Completed or CompletedWithWarning stage.

        Raises:
            PipelineAbortedError: If input is missing (400), recognition
                fails (502) or translation fails (adapter status).
        """
        if not request.audio:
            raise PipelineAbortedError(
                stage=PipelineStage.RECEIVED.value,
                error=MISSING_INPUT,
                message="Audio file is required",
                status_code=400,
            )
        chatflow_id = self._resolve_chatflow(request.chatflow_id)

        logger.info(
            "Audio translation started",
            extra={
                "audio_size": len(request.audio),
                "mime_type": request.mime_type,
                "chatflow_id": chatflow_id,
                "target_language": request.target_language,
            },
        )

        transcription = self._transcribe(request)
        translation = self._translate(
            transcription.text,
            chatflow_id,
            request.source_language,
            request.target_language,
        )
        synthesis, warnings = self._synthesize(
            translation, request.synthesize_speech, request.synthesis
        )
        return self._complete(translation, synthesis, warnings, transcription)

    def run_text(self, request: TextTranslationRequest) -> PipelineOutcome:
        """
        Runs the translate-and-speak flow, starting at translation.

        Raises:
            PipelineAbortedError: If the text or chatflow is missing, or
                translation fails.
        """
        if not request.text.strip():
            raise PipelineAbortedError(
                stage=PipelineStage.RECEIVED.value,
                error=MISSING_INPUT,
                message="Text to translate is required",
                status_code=400,
            )
        chatflow_id = self._resolve_chatflow(request.chatflow_id)

        translation = self._translate(
            request.text,
            chatflow_id,
            request.source_language,
            request.target_language,
            request.history,
        )
        synthesis, warnings = self._synthesize(
            translation, request.synthesize_speech, request.synthesis
        )
        return self._complete(translation, synthesis, warnings)

    def _resolve_chatflow(self, chatflow_id: str | None) -> str:
        resolved = chatflow_id or self._default_chatflow_id
        if not resolved:
            raise PipelineAbortedError(
                stage=PipelineStage.RECEIVED.value,
                error=MISSING_INPUT,
                message="chatflowId is required and no default chatflow is configured",
                status_code=400,
            )
        return resolved

    def _transcribe(self, request: AudioTranslationRequest) -> TranscriptionResult:
        try:
            transcription = self._recognizer.transcribe(
                request.audio,
                mime_type=request.mime_type,
                language_code=request.recognition_language_code,
                alternative_language_codes=request.recognition_language_codes,
            )
        except TranscriptionError as e:
            logger.warning(
                "Pipeline aborted during transcription",
                extra={"kind": e.kind.value, "error": str(e)},
            )
            raise PipelineAbortedError(
                stage=PipelineStage.TRANSCRIBING.value,
                error=e.kind.value,
                message=str(e),
                status_code=502,
                cause=e,
            ) from e

        if not transcription.text.strip():
            logger.warning("Pipeline aborted on an empty transcript")
            raise PipelineAbortedError(
                stage=PipelineStage.TRANSCRIBING.value,
                error=TranscriptionFailure.EMPTY_TRANSCRIPT.value,
                message="No transcription result",
                status_code=502,
            )
        return transcription

    def _translate(
        self,
        text: str,
        chatflow_id: str,
        source_language: str,
        target_language: str,
        history: tuple[ChatTurn, ...] = (),
    ) -> TranslationResult:
        try:
            reply = self._conversation.send_message(
                text,
                chatflow_id,
                source_language=source_language or "auto",
                target_language=target_language or "auto",
                history=history,
            )
        except ConversationError as e:
            logger.warning(
                "Pipeline aborted during translation",
                extra={"status_code": e.status_code, "error": str(e)},
            )
            raise PipelineAbortedError(
                stage=PipelineStage.TRANSLATING.value,
                error="TranslationFailed",
                message=str(e),
                status_code=e.status_code or 500,
                cause=e,
            ) from e

        if not reply.answer:
            raise PipelineAbortedError(
                stage=PipelineStage.TRANSLATING.value,
                error="TranslationFailed",
                message="Translation service returned no answer",
                status_code=502,
            )

        return TranslationResult(
            original_text=text,
            translated_text=reply.answer.strip(),
            source_language=source_language or "auto",
            target_language=target_language or "auto",
        )

    def _synthesize(
        self,
        translation: TranslationResult,
        enabled: bool,
        options: SynthesisOptions | None,
    ) -> tuple[SynthesisResult | None, tuple[str, ...]]:
        if not enabled or not translation.translated_text:
            return None, ()
        options = options or SynthesisOptions(
            language_code=synthesis_language_for(translation.target_language)
        )
        try:
            return self._synthesizer.synthesize(translation.translated_text, options), ()
        except UpstreamError as e:
            logger.warning(
                "Speech synthesis degraded to warning",
                extra={"language_code": options.language_code, "error": str(e)},
            )
            return None, (f"{SPEECH_WARNING_PREFIX}{e}",)

    @staticmethod
    def _complete(
        translation: TranslationResult,
        synthesis: SynthesisResult | None,
        warnings: tuple[str, ...],
        transcription: TranscriptionResult | None = None,
    ) -> PipelineOutcome:
        stage = PipelineStage.COMPLETED_WITH_WARNING if warnings else PipelineStage.COMPLETED
        logger.info(
            "Translation pipeline finished",
            extra={
                "stage": stage.value,
                "audio_size": len(synthesis.audio_content) if synthesis else 0,
                "warning_count": len(warnings),
            },
        )
        return PipelineOutcome(
            stage=stage,
            translation=translation,
            transcription=transcription,
            synthesis=synthesis,
            warnings=warnings,
        )
