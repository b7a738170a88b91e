"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    api_key: str
    base_url: str
    model: str
    language: str
    content_type: str


@dataclass(frozen=True, slots=True)
class StreamingSettings:
    partial_window: int
    provider_timeout_s: float
    max_session_audio_bytes: int


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    provider: ProviderSettings
    streaming: StreamingSettings
    limits: LimitsSettings
    websocket: WebSocketSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ProviderSettings",
    "StreamingSettings",
    "WebSocketSettings",
]
