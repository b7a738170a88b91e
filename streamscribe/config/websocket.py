"""WebSocket protocol configuration and constants."""

from __future__ import annotations

from .env import get_int, get_str, get_float

SERVER_HOST: str = get_str("SERVER_HOST", "0.0.0.0")
WS_PORT: int = get_int("WS_PORT", 3001)

# The capture client connects to the bare server URL.
WS_ENDPOINT_PATH: str = get_str("WS_ENDPOINT_PATH", "/")

# Message keys
WS_KEY_TYPE = "type"
WS_KEY_TEXT = "text"
WS_KEY_IS_FINAL = "isFinal"
WS_KEY_MESSAGE = "message"

# Message types
WS_TYPE_STOP = "stop"
WS_TYPE_TRANSCRIPTION = "transcription"
WS_TYPE_ERROR = "error"

# Close codes
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Idle watchdog
WS_IDLE_TIMEOUT_S: float = get_float("WS_IDLE_TIMEOUT_S", 150.0)
WS_WATCHDOG_TICK_S: float = get_float("WS_WATCHDOG_TICK_S", 5.0)
WS_MAX_CONNECTION_DURATION_S: float = max(0.0, get_float("WS_MAX_CONNECTION_DURATION_S", 3600.0))

# Client-visible error messages
WS_ERROR_TRANSCRIBE_FAILED = "Failed to transcribe audio"
WS_ERROR_PROCESS_FAILED = "Failed to process audio"
WS_ERROR_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."

__all__ = [
    "SERVER_HOST",
    "WS_PORT",
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_TEXT",
    "WS_KEY_IS_FINAL",
    "WS_KEY_MESSAGE",
    "WS_TYPE_STOP",
    "WS_TYPE_TRANSCRIPTION",
    "WS_TYPE_ERROR",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_CONNECTION_DURATION_S",
    "WS_ERROR_TRANSCRIBE_FAILED",
    "WS_ERROR_PROCESS_FAILED",
    "WS_ERROR_SERVER_AT_CAPACITY",
]
