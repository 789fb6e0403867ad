"""Tests for the recognize → translate → speak pipeline."""

import pytest

from travel_assistant.domain.models import (
    AudioTranslationRequest,
    PipelineStage,
    SynthesisOptions,
    TextTranslationRequest,
    TranscriptionResult,
)
from travel_assistant.exceptions import (
    ConversationError,
    PipelineAbortedError,
    SynthesisError,
    SynthesisFailure,
    TranscriptionError,
    TranscriptionFailure,
)
from travel_assistant.handlers import TranslationPipeline

from conftest import reply


def audio_request(**overrides) -> AudioTranslationRequest:
    fields = {
        "audio": b"RIFF....WAVEfmt ",
        "mime_type": "audio/webm",
        "chatflow_id": "translate-flow",
        "source_language": "en",
        "target_language": "es",
    }
    fields.update(overrides)
    return AudioTranslationRequest(**fields)


class TestRun:
    def test_completes_all_stages(self, pipeline, recognizer, conversation, synthesizer):
        outcome = pipeline.run(audio_request())

        assert outcome.stage == PipelineStage.COMPLETED
        assert outcome.transcription.text == "Hello, how are you?"
        assert outcome.translation.translated_text == "Hola, ¿cómo estás?"
        assert len(outcome.synthesis.audio_content) == 12345
        assert outcome.warnings == ()
        recognizer.transcribe.assert_called_once()
        conversation.send_message.assert_called_once()
        synthesizer.synthesize.assert_called_once()

    def test_translator_receives_exact_transcript(self, pipeline, conversation):
        pipeline.run(audio_request())

        args, kwargs = conversation.send_message.call_args
        assert args[0] == "Hello, how are you?"
        assert args[1] == "translate-flow"
        assert kwargs["source_language"] == "en"
        assert kwargs["target_language"] == "es"

    def test_synthesizes_translated_text_in_target_language(self, pipeline, synthesizer):
        pipeline.run(audio_request())

        text, options = synthesizer.synthesize.call_args.args
        assert text == "Hola, ¿cómo estás?"
        assert options.language_code == "es-ES"

    def test_auto_target_speaks_english(self, pipeline, synthesizer):
        pipeline.run(audio_request(target_language="auto"))

        _, options = synthesizer.synthesize.call_args.args
        assert options.language_code == "en-US"

    def test_explicit_synthesis_options_are_used(self, pipeline, synthesizer):
        options = SynthesisOptions(language_code="es-MX", voice_name="es-US-Neural2-A")
        pipeline.run(audio_request(synthesis=options))

        assert synthesizer.synthesize.call_args.args[1] == options

    def test_recognition_hints_are_forwarded(self, pipeline, recognizer):
        pipeline.run(
            audio_request(
                recognition_language_code="es-ES",
                recognition_language_codes=("en-US",),
            )
        )

        kwargs = recognizer.transcribe.call_args.kwargs
        assert kwargs["mime_type"] == "audio/webm"
        assert kwargs["language_code"] == "es-ES"
        assert kwargs["alternative_language_codes"] == ("en-US",)

    def test_speech_can_be_skipped(self, pipeline, synthesizer):
        outcome = pipeline.run(audio_request(synthesize_speech=False))

        assert outcome.synthesis is None
        assert outcome.stage == PipelineStage.COMPLETED
        synthesizer.synthesize.assert_not_called()


class TestAborts:
    def test_missing_audio(self, pipeline, recognizer):
        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request(audio=b""))

        assert exc_info.value.error == "MissingInput"
        assert exc_info.value.status_code == 400
        recognizer.transcribe.assert_not_called()

    def test_missing_chatflow_without_default(self, pipeline, recognizer):
        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request(chatflow_id=None))

        assert exc_info.value.status_code == 400
        recognizer.transcribe.assert_not_called()

    def test_default_chatflow_is_used(self, recognizer, conversation, synthesizer):
        pipeline = TranslationPipeline(
            recognizer, conversation, synthesizer, default_chatflow_id="default-flow"
        )
        pipeline.run(audio_request(chatflow_id=None))

        assert conversation.send_message.call_args.args[1] == "default-flow"

    def test_empty_transcript_skips_translation(self, pipeline, recognizer, conversation):
        recognizer.transcribe.side_effect = TranscriptionError(
            TranscriptionFailure.EMPTY_TRANSCRIPT, "No transcription result from Google STT"
        )

        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request())

        assert exc_info.value.stage == PipelineStage.TRANSCRIBING.value
        assert exc_info.value.error == "EmptyTranscript"
        assert exc_info.value.status_code == 502
        assert str(exc_info.value) == "No transcription result from Google STT"
        conversation.send_message.assert_not_called()

    def test_blank_transcript_result_skips_translation(
        self, pipeline, recognizer, conversation, synthesizer
    ):
        recognizer.transcribe.return_value = TranscriptionResult(text="   ")

        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request())

        assert exc_info.value.stage == PipelineStage.TRANSCRIBING.value
        assert exc_info.value.error == "EmptyTranscript"
        assert exc_info.value.status_code == 502
        assert conversation.send_message.call_count == 0
        synthesizer.synthesize.assert_not_called()

    def test_translation_failure_skips_synthesis(self, pipeline, conversation, synthesizer):
        conversation.send_message.side_effect = ConversationError(
            "Chatflow not found", status_code=404
        )

        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request())

        assert exc_info.value.stage == PipelineStage.TRANSLATING.value
        assert exc_info.value.error == "TranslationFailed"
        assert exc_info.value.status_code == 404
        synthesizer.synthesize.assert_not_called()

    def test_empty_translation_aborts(self, pipeline, conversation, synthesizer):
        conversation.send_message.return_value = reply(None)

        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run(audio_request())

        assert exc_info.value.status_code == 502
        synthesizer.synthesize.assert_not_called()


class TestSynthesisDegradation:
    def test_quota_exceeded_becomes_warning(self, pipeline, synthesizer):
        synthesizer.synthesize.side_effect = SynthesisError(
            SynthesisFailure.QUOTA_EXCEEDED, "Text-to-Speech API quota exceeded"
        )

        outcome = pipeline.run(audio_request())

        assert outcome.stage == PipelineStage.COMPLETED_WITH_WARNING
        assert outcome.translation.translated_text == "Hola, ¿cómo estás?"
        assert outcome.synthesis is None
        assert outcome.warnings == ("Text-to-speech failed: Text-to-Speech API quota exceeded",)


class TestRunText:
    def test_enters_at_translation(self, pipeline, recognizer, conversation):
        request = TextTranslationRequest(
            text="Where is the station?",
            chatflow_id="translate-flow",
            target_language="es",
        )

        outcome = pipeline.run_text(request)

        recognizer.transcribe.assert_not_called()
        assert conversation.send_message.call_args.args[0] == "Where is the station?"
        assert outcome.transcription is None
        assert outcome.synthesis is not None

    def test_blank_text_is_rejected(self, pipeline, conversation):
        with pytest.raises(PipelineAbortedError) as exc_info:
            pipeline.run_text(TextTranslationRequest(text="   ", chatflow_id="flow"))

        assert exc_info.value.error == "MissingInput"
        conversation.send_message.assert_not_called()
