"""Translation, speech and voice endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile

from travel_assistant.config import AppConfig
from travel_assistant.dependencies import (
    get_audio_storage,
    get_config,
    get_conversation,
    get_image_translator,
    get_pipeline,
    get_synthesizer,
)
from travel_assistant.domain.models import (
    AudioFormat,
    AudioTranslationRequest,
    SsmlGender,
    SynthesisOptions,
    TextTranslationRequest,
)
from travel_assistant.domain.voices import (
    supported_translation_languages,
    supported_tts_languages,
    synthesis_language_for,
)
from travel_assistant.exceptions import (
    ApiError,
    ConversationError,
    InputError,
    PipelineAbortedError,
    StorageUploadError,
    SynthesisError,
)
from travel_assistant.handlers import ImageTranslationHandler, TranslationPipeline
from travel_assistant.infrastructure.interfaces import (
    AudioStorage,
    ConversationService,
    SpeechSynthesizer,
)
from travel_assistant.logging import setup_logging
from travel_assistant.request_models import (
    TextToSpeechBody,
    TextTranslationBody,
    TranslateAndSpeakBody,
    VoiceSettings,
    to_turns,
)
from travel_assistant.response_models import (
    AUDIO_MIME_TYPES,
    audio_payload,
    outcome_payload,
    success_response,
)

logger = setup_logging()

router = APIRouter(prefix="/api/translation", tags=["translation"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
PipelineDep = Annotated[TranslationPipeline, Depends(get_pipeline)]
ImageTranslatorDep = Annotated[ImageTranslationHandler, Depends(get_image_translator)]
ConversationDep = Annotated[ConversationService, Depends(get_conversation)]
SynthesizerDep = Annotated[SpeechSynthesizer, Depends(get_synthesizer)]
StorageDep = Annotated[AudioStorage, Depends(get_audio_storage)]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _synthesis_options(settings: VoiceSettings, target_language: str) -> SynthesisOptions:
    return SynthesisOptions(
        language_code=settings.language_code or synthesis_language_for(target_language),
        voice_name=settings.voice_name,
        audio_format=settings.audio_format,
        speaking_rate=settings.speaking_rate,
        pitch=settings.pitch,
        volume_gain_db=settings.volume_gain_db,
        ssml_gender=settings.ssml_gender,
    )


def _split_codes(value: str | None) -> tuple[str, ...] | None:
    if not value:
        return None
    codes = tuple(code.strip() for code in value.split(",") if code.strip())
    return codes or None


@router.post("/text")
def translate_text(body: TextTranslationBody, pipeline: PipelineDep):
    """Translates text through the translation chatflow."""
    request = TextTranslationRequest(
        text=body.message,
        chatflow_id=body.chatflow_id,
        source_language=body.source_language,
        target_language=body.target_language,
        history=to_turns(body.history),
        synthesize_speech=False,
    )
    try:
        outcome = pipeline.run_text(request)
    except PipelineAbortedError as e:
        raise ApiError(e.status_code, e.error, str(e))

    translation = outcome.translation
    return success_response(
        {
            "originalText": translation.original_text,
            "translatedText": translation.translated_text,
            "sourceLanguage": translation.source_language,
            "targetLanguage": translation.target_language,
            "timestamp": _now(),
        },
        "Translation completed successfully",
    )


@router.post("/image")
def translate_image(
    image: Annotated[UploadFile, File()],
    translator: ImageTranslatorDep,
    chatflow_id: Annotated[str, Form(alias="chatflowId", min_length=1)],
    source_language: Annotated[str, Form(alias="sourceLanguage")] = "auto",
    target_language: Annotated[str, Form(alias="targetLanguage")] = "en",
    prompt: Annotated[str | None, Form()] = None,
):
    """Extracts and translates the text shown in an uploaded image."""
    content = image.file.read()
    try:
        result, raw_answer = translator.translate(
            content,
            image.content_type,
            chatflow_id,
            source_language,
            target_language,
            prompt_template=prompt,
        )
    except InputError as e:
        raise ApiError(e.status_code, e.error, str(e))
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to translate image", str(e))

    return success_response(
        {
            "originalText": result.original_text,
            "translatedText": result.translated_text,
            "detectedLanguage": result.detected_language,
            "description": result.description,
            "sourceLanguage": source_language,
            "targetLanguage": target_language,
            "rawResponse": raw_answer,
            "fileName": image.filename,
            "timestamp": _now(),
        },
        "Image translation completed successfully",
    )


@router.post("/text-to-speech")
def text_to_speech(
    body: TextToSpeechBody, synthesizer: SynthesizerDep, storage: StorageDep
):
    """
    Synthesizes text to speech.

    Returns the raw audio bytes unless returnAudio is false, in which case
    a JSON envelope describes the audio (and the saved file, if any).
    """
    options = _synthesis_options(body, body.language_code or "en-US")
    try:
        synthesis = synthesizer.synthesize(body.text, options)
    except SynthesisError as e:
        raise ApiError(e.status_code, e.kind.value, str(e))

    stored = None
    if body.save_to_file:
        try:
            stored = storage.save(synthesis.audio_content, synthesis.audio_format)
        except StorageUploadError as e:
            raise ApiError(500, "Failed to save audio file", str(e))

    if body.return_audio:
        headers = {
            "X-Voice-Name": synthesis.voice_name,
            "X-Language-Code": synthesis.language_code,
            "X-Audio-Size": str(len(synthesis.audio_content)),
        }
        if stored is not None:
            headers["X-Audio-File"] = stored.filename
        return Response(
            content=synthesis.audio_content,
            media_type=AUDIO_MIME_TYPES[synthesis.audio_format],
            headers=headers,
        )

    audio = audio_payload(synthesis)
    del audio["content"]
    return success_response(
        {
            "audio": audio,
            "file": (
                {"fileName": stored.filename, "filePath": stored.file_path, "size": stored.size}
                if stored
                else None
            ),
            "timestamp": _now(),
        },
        "Speech synthesized successfully",
    )


@router.post("/translate-and-speak")
def translate_and_speak(body: TranslateAndSpeakBody, pipeline: PipelineDep):
    """Translates text, then speaks the translation in the target language."""
    request = TextTranslationRequest(
        text=body.message,
        chatflow_id=body.chatflow_id,
        source_language=body.source_language,
        target_language=body.target_language,
        history=to_turns(body.history),
        synthesis=_synthesis_options(body, body.target_language),
    )
    try:
        outcome = pipeline.run_text(request)
    except PipelineAbortedError as e:
        raise ApiError(e.status_code, e.error, str(e))

    return success_response(
        outcome_payload(outcome, _now()),
        "Translation and speech synthesis completed",
        outcome.warnings,
    )


@router.post("/audio-translate-speak")
def audio_translate_speak(
    audio: Annotated[UploadFile, File()],
    pipeline: PipelineDep,
    chatflow_id: Annotated[str | None, Form(alias="chatflowId")] = None,
    source_language: Annotated[str, Form(alias="sourceLanguage")] = "auto",
    target_language: Annotated[str, Form(alias="targetLanguage")] = "auto",
    recognition_language_code: Annotated[str | None, Form(alias="languageCode")] = None,
    alternative_language_codes: Annotated[
        str | None, Form(alias="alternativeLanguageCodes")
    ] = None,
    voice_language_code: Annotated[str | None, Form(alias="voiceLanguageCode")] = None,
    voice_name: Annotated[str | None, Form(alias="voiceName")] = None,
    audio_format: Annotated[AudioFormat, Form(alias="audioFormat")] = "mp3",
    speaking_rate: Annotated[float, Form(alias="speakingRate", ge=0.25, le=4.0)] = 1.0,
    pitch: Annotated[float, Form(ge=-20.0, le=20.0)] = 0.0,
    ssml_gender: Annotated[SsmlGender, Form(alias="ssmlGender")] = "NEUTRAL",
):
    """
    Runs the full pipeline on recorded speech: transcribe, translate, speak.

    Recognition and translation failures fail the request. A synthesis
    failure still returns the translation, with a warning instead of audio.
    """
    settings = VoiceSettings(
        language_code=voice_language_code,
        voice_name=voice_name,
        audio_format=audio_format,
        speaking_rate=speaking_rate,
        pitch=pitch,
        ssml_gender=ssml_gender,
    )
    request = AudioTranslationRequest(
        audio=audio.file.read(),
        mime_type=audio.content_type,
        chatflow_id=chatflow_id,
        source_language=source_language,
        target_language=target_language,
        recognition_language_code=recognition_language_code,
        recognition_language_codes=_split_codes(alternative_language_codes),
        synthesis=_synthesis_options(settings, target_language),
    )
    try:
        outcome = pipeline.run(request)
    except PipelineAbortedError as e:
        logger.warning(
            "Audio translation aborted",
            extra={"stage": e.stage, "error": e.error, "status_code": e.status_code},
        )
        raise ApiError(e.status_code, e.error, str(e))

    return success_response(
        outcome_payload(outcome, _now()),
        "Audio translation completed",
        outcome.warnings,
    )


@router.get("/languages")
def list_languages():
    return success_response(
        supported_translation_languages(), "Supported languages retrieved successfully"
    )


@router.get("/tts-languages")
def list_tts_languages():
    return success_response(
        supported_tts_languages(), "Supported text-to-speech languages retrieved successfully"
    )


@router.get("/voices")
def list_voices(
    synthesizer: SynthesizerDep,
    language_code: Annotated[str | None, Query(alias="languageCode")] = None,
):
    """Lists the synthesis voices available, optionally for one language."""
    try:
        voices = synthesizer.list_voices(language_code)
    except SynthesisError as e:
        raise ApiError(e.status_code, e.kind.value, str(e))
    return success_response(
        {"voices": voices, "count": len(voices), "languageCode": language_code},
        "Voices retrieved successfully",
    )


@router.get("/chatflows")
def list_chatflows(conversation: ConversationDep, config: ConfigDep):
    try:
        chatflows = conversation.list_chatflows()
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to retrieve chatflows", str(e))
    return success_response(
        {
            "chatflows": chatflows,
            "defaultChatflowId": config.flowise.default_translation_chatflow_id,
        },
        "Chatflows retrieved successfully",
    )
