"""Speech-to-text provider interface."""

from __future__ import annotations

from typing import Protocol


class TranscriptionProvider(Protocol):
    async def transcribe(self, audio: bytes, content_type: str, *, filename: str = "audio.webm") -> str:
        """Return the transcript of `audio` or raise `ProviderError`."""
        ...


__all__ = ["TranscriptionProvider"]
