"""Shared error types for the streaming transcription server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float


class ProviderError(Exception):
    """Raised when the speech-to-text provider cannot produce a transcript."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


class MalformedControlMessage(Exception):
    """Raised for a JSON control envelope whose `type` is not recognized."""

    def __init__(self, msg_type: str) -> None:
        super().__init__(f"unsupported control message type '{msg_type}'")
        self.msg_type = msg_type


__all__ = ["MalformedControlMessage", "ProviderError", "RateLimitError"]
