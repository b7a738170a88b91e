"""Streaming transcription coordinator.

Transport-agnostic: callers hand raw inbound frames to `StreamingCoordinator`
and receive outbound messages through the `send` callable given at
`open_session` time. Nothing in this package imports FastAPI.
"""

from .store import SessionStore
from .base import TranscriptionProvider
from .dispatcher import SessionDispatcher
from .coordinator import StreamingCoordinator
from .whisper_api import WhisperApiClient

__all__ = [
    "SessionDispatcher",
    "SessionStore",
    "StreamingCoordinator",
    "TranscriptionProvider",
    "WhisperApiClient",
]
