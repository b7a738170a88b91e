"""Admission control and rate limit configuration (env-resolved constants only)."""

from __future__ import annotations

import os

from .env import DISABLED_VALUES, get_int, get_float

MAX_CONCURRENT_CONNECTIONS: int = max(1, get_int("MAX_CONCURRENT_CONNECTIONS", 100))

WS_MESSAGE_WINDOW_SECONDS: float = get_float("WS_MESSAGE_WINDOW_SECONDS", 60.0)
if WS_MESSAGE_WINDOW_SECONDS <= 0:
    WS_MESSAGE_WINDOW_SECONDS = 60.0

# Browser recorders emit one fragment per timeslice (1s by default), so a
# session only sends ~60 frames/minute. Leave headroom for short timeslices.
WS_MAX_MESSAGES_PER_WINDOW: int = max(1, get_int("WS_MAX_MESSAGES_PER_WINDOW", 5000))

# Upper bound on one session's buffered audio. The hosted Whisper API rejects
# uploads above 25 MiB, so a larger final payload could never succeed.
_MAX_SESSION_AUDIO_BYTES_RAW = (os.getenv("MAX_SESSION_AUDIO_BYTES") or "").strip()
if _MAX_SESSION_AUDIO_BYTES_RAW.lower() in DISABLED_VALUES:
    MAX_SESSION_AUDIO_BYTES: int = 0
else:
    MAX_SESSION_AUDIO_BYTES = max(0, get_int("MAX_SESSION_AUDIO_BYTES", 25 * 1024 * 1024))

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "MAX_SESSION_AUDIO_BYTES",
    "WS_MAX_MESSAGES_PER_WINDOW",
    "WS_MESSAGE_WINDOW_SECONDS",
]
