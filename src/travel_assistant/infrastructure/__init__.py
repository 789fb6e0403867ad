"""Concrete implementations of infrastructure interfaces."""

from .flowise_client import FlowiseClient
from .google_auth import ApiKeyAuth, BearerAuth, select_auth
from .google_maps_directions import GoogleMapsDirections
from .google_speech_recognizer import GoogleSpeechRecognizer
from .google_speech_synthesizer import GoogleSpeechSynthesizer
from .local_audio_storage import LocalAudioStorage
from .mock_directions import MockDirections

__all__ = [
    "ApiKeyAuth",
    "BearerAuth",
    "FlowiseClient",
    "GoogleMapsDirections",
    "GoogleSpeechRecognizer",
    "GoogleSpeechSynthesizer",
    "LocalAudioStorage",
    "MockDirections",
    "select_auth",
]
