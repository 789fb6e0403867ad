"""Shared fixtures: adapter doubles and an API client with overridden dependencies."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from travel_assistant import dependencies
from travel_assistant.domain.models import ConversationReply, SynthesisResult, TranscriptionResult
from travel_assistant.handlers import (
    CurrencyHandler,
    ImageTranslationHandler,
    RecommendationsHandler,
    ScamPreventionHandler,
    TranslationPipeline,
)
from travel_assistant.infrastructure import MockDirections
from travel_assistant.infrastructure.interfaces import (
    AudioStorage,
    ConversationService,
    SpeechRecognizer,
    SpeechSynthesizer,
)
from travel_assistant.main import app


def reply(answer: str | None) -> ConversationReply:
    return ConversationReply(data={"text": answer} if answer else {}, answer=answer)


def spanish_audio(size: int = 12345) -> SynthesisResult:
    return SynthesisResult(
        audio_content=b"\x00" * size,
        audio_format="mp3",
        language_code="es-ES",
        voice_name="es-ES-Wavenet-B",
        requested_voice_name="es-ES-Wavenet-B",
    )


@pytest.fixture
def recognizer():
    mock = MagicMock(spec=SpeechRecognizer)
    mock.transcribe.return_value = TranscriptionResult(
        text="Hello, how are you?", language_hint="en-us"
    )
    return mock


@pytest.fixture
def conversation():
    mock = MagicMock(spec=ConversationService)
    mock.send_message.return_value = reply("Hola, ¿cómo estás?")
    mock.ping.return_value = "pong"
    return mock


@pytest.fixture
def synthesizer():
    mock = MagicMock(spec=SpeechSynthesizer)
    mock.synthesize.return_value = spanish_audio()
    return mock


@pytest.fixture
def storage():
    return MagicMock(spec=AudioStorage)


@pytest.fixture
def pipeline(recognizer, conversation, synthesizer):
    return TranslationPipeline(recognizer, conversation, synthesizer, default_chatflow_id=None)


@pytest.fixture
def client(pipeline, conversation, synthesizer, storage):
    """TestClient whose adapters are all test doubles."""
    overrides = {
        dependencies.get_pipeline: lambda: pipeline,
        dependencies.get_conversation: lambda: conversation,
        dependencies.get_synthesizer: lambda: synthesizer,
        dependencies.get_audio_storage: lambda: storage,
        dependencies.get_image_translator: lambda: ImageTranslationHandler(conversation),
        dependencies.get_recommendations: lambda: RecommendationsHandler(conversation),
        dependencies.get_scam_prevention: lambda: ScamPreventionHandler(conversation, None),
        dependencies.get_currency: lambda: CurrencyHandler(conversation, "currency-flow"),
        dependencies.get_directions: lambda: MockDirections(),
    }
    app.dependency_overrides.update(overrides)
    yield TestClient(app)
    app.dependency_overrides.clear()
