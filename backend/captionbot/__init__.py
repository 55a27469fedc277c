"""Client library for the CaptionBot image-captioning service.

Layers:
- domain: entities, repository interfaces and use cases
- data: HTTP adapter for the service and repository implementations
- core: configuration, DI, errors and utilities
"""
from captionbot.core.exceptions import (
    CaptionBotError,
    DecodeError,
    MalformedResponseError,
    NotInitializedError,
    TaskSubmissionError,
    TransportError,
    UploadError,
)
from captionbot.data.adapters.captionbot_client import CaptionBotClient, CaptionBotConfig

__all__ = [
    "CaptionBotClient",
    "CaptionBotConfig",
    "CaptionBotError",
    "DecodeError",
    "MalformedResponseError",
    "NotInitializedError",
    "TaskSubmissionError",
    "TransportError",
    "UploadError",
]
