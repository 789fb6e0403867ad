from travel_assistant.config import AppConfig, load_config
from travel_assistant.exceptions import (
    ApiError,
    ConversationError,
    DirectionsError,
    InputError,
    PipelineAbortedError,
    StorageUploadError,
    SynthesisError,
    TranscriptionError,
    UpstreamError,
)
from travel_assistant.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "ApiError",
    "ConversationError",
    "DirectionsError",
    "InputError",
    "PipelineAbortedError",
    "StorageUploadError",
    "SynthesisError",
    "TranscriptionError",
    "UpstreamError",
]
