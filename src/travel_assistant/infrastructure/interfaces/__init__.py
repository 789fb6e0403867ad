"""Infrastructure interface exports."""

from .audio_storage import AudioStorage
from .conversation_service import ConversationService
from .directions_provider import DirectionsProvider
from .speech_recognizer import SpeechRecognizer
from .speech_synthesizer import SpeechSynthesizer

__all__ = [
    "AudioStorage",
    "ConversationService",
    "DirectionsProvider",
    "SpeechRecognizer",
    "SpeechSynthesizer",
]
