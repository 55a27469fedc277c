from typing import Optional


class CaptionBotError(Exception):
    """Base exception for the CaptionBot client."""


class TransportError(CaptionBotError):
    """Raised when a request to the service fails at the network level."""


class UploadError(TransportError):
    """Raised when posting a local image to the upload endpoint fails."""


class DecodeError(CaptionBotError, ValueError):
    """Raised when a response body is not the JSON shape the service promises."""


class NotInitializedError(CaptionBotError):
    """Raised when a caption is requested before the session was initialized."""


class TaskSubmissionError(CaptionBotError):
    """Raised when the service rejects a caption task with a non 2XX status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"non 2XX status code ({status_code}) when POST-ing caption task")


class MalformedResponseError(CaptionBotError):
    """Raised when a decoded response lacks the fields a caption needs."""
