"""Per-connection transcription session state."""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(slots=True)
class Session:
    """Buffered audio and running transcript for one open connection.

    `audio_chunks` is append-only until the session is removed; its order is
    the order fragments are transcribed in. `running_transcript` and
    `partial_count` are only written by the session's dispatcher.
    """

    id: str
    audio_chunks: list[bytes] = field(default_factory=list)
    chunk_count: int = 0
    audio_bytes: int = 0
    running_transcript: str = ""
    partial_count: int = 0
    finalizing: bool = False
    audio_limit_reported: bool = False
    request_seq: int = 0

    def append_chunk(self, chunk: bytes) -> int:
        self.audio_chunks.append(chunk)
        self.chunk_count += 1
        self.audio_bytes += len(chunk)
        return self.chunk_count

    def recent_audio(self, window: int) -> bytes:
        return b"".join(self.audio_chunks[-window:])

    def full_audio(self) -> bytes:
        return b"".join(self.audio_chunks)

    def next_request_seq(self) -> int:
        self.request_seq += 1
        return self.request_seq


__all__ = ["Session"]
