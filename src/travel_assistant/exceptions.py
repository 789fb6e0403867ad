"""Custom exceptions for the travel assistant API."""

from enum import Enum


class InputError(Exception):
    """Raised when request data is missing or invalid."""

    status_code = 400

    def __init__(self, message: str, error: str = "Invalid input"):
        self.error = error
        super().__init__(message)


class UpstreamError(Exception):
    """Raised when an external provider call fails."""

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class TranscriptionFailure(str, Enum):
    EMPTY_TRANSCRIPT = "EmptyTranscript"
    AUTH_UNAVAILABLE = "AuthUnavailable"
    PROVIDER_ERROR = "ProviderError"


class TranscriptionError(UpstreamError):
    """Raised when speech recognition fails."""

    def __init__(
        self,
        kind: TranscriptionFailure,
        message: str,
        cause: Exception | None = None,
    ):
        self.kind = kind
        super().__init__(message, status_code=502, cause=cause)


class ConversationError(UpstreamError):
    """Raised when the conversational-AI provider call fails."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        cause: Exception | None = None,
    ):
        super().__init__(message, status_code=status_code, cause=cause)


class SynthesisFailure(str, Enum):
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    PERMISSION_DENIED = "PermissionDenied"
    INVALID_ARGUMENT = "InvalidArgument"
    QUOTA_EXCEEDED = "QuotaExceeded"
    SYNTHESIS_FAILED = "SynthesisFailed"


_SYNTHESIS_STATUS = {
    SynthesisFailure.SERVICE_UNAVAILABLE: 503,
    SynthesisFailure.PERMISSION_DENIED: 502,
    SynthesisFailure.INVALID_ARGUMENT: 400,
    SynthesisFailure.QUOTA_EXCEEDED: 429,
    SynthesisFailure.SYNTHESIS_FAILED: 502,
}


class SynthesisError(UpstreamError):
    """Raised when speech synthesis fails."""

    def __init__(
        self,
        kind: SynthesisFailure,
        message: str,
        cause: Exception | None = None,
    ):
        self.kind = kind
        super().__init__(message, status_code=_SYNTHESIS_STATUS[kind], cause=cause)


class DirectionsError(UpstreamError):
    """Raised when the maps/directions provider call fails."""


class PipelineAbortedError(Exception):
    """Raised when a required stage of the audio translation pipeline fails."""

    def __init__(
        self,
        stage: str,
        error: str,
        message: str,
        status_code: int,
        cause: Exception | None = None,
    ):
        self.stage = stage
        self.error = error
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class StorageUploadError(Exception):
    """Raised when writing an audio file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to save '{object_name}' to storage")


class ApiError(Exception):
    """Raised by routes to produce a failure envelope."""

    def __init__(self, status_code: int, error: str, message: str):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)
