"""Load runtime settings.

Configuration values are resolved from the environment in
`streamscribe/config/*` and exposed here as structured dataclasses for the
rest of the server.
"""

from __future__ import annotations

from streamscribe.config.secrets import OPENAI_API_KEY
from streamscribe.config.streaming import STT_PARTIAL_WINDOW, STT_PROVIDER_TIMEOUT_S
from streamscribe.config.websocket import (
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
    WS_MAX_CONNECTION_DURATION_S,
)
from streamscribe.config.provider import (
    STT_MODEL,
    STT_LANGUAGE,
    OPENAI_BASE_URL,
    STT_CONTENT_TYPE,
)
from streamscribe.state.settings import (
    AppSettings,
    LimitsSettings,
    ProviderSettings,
    StreamingSettings,
    WebSocketSettings,
)
from streamscribe.config.limits import (
    MAX_SESSION_AUDIO_BYTES,
    WS_MESSAGE_WINDOW_SECONDS,
    MAX_CONCURRENT_CONNECTIONS,
    WS_MAX_MESSAGES_PER_WINDOW,
)


def load_settings() -> AppSettings:
    return AppSettings(
        provider=ProviderSettings(
            api_key=OPENAI_API_KEY,
            base_url=OPENAI_BASE_URL,
            model=STT_MODEL,
            language=STT_LANGUAGE,
            content_type=STT_CONTENT_TYPE,
        ),
        streaming=StreamingSettings(
            partial_window=STT_PARTIAL_WINDOW,
            provider_timeout_s=STT_PROVIDER_TIMEOUT_S,
            max_session_audio_bytes=MAX_SESSION_AUDIO_BYTES,
        ),
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
            ws_message_window_seconds=WS_MESSAGE_WINDOW_SECONDS,
            ws_max_messages_per_window=WS_MAX_MESSAGES_PER_WINDOW,
        ),
        websocket=WebSocketSettings(
            idle_timeout_s=WS_IDLE_TIMEOUT_S,
            watchdog_tick_s=WS_WATCHDOG_TICK_S,
            max_connection_duration_s=WS_MAX_CONNECTION_DURATION_S,
        ),
    )


__all__ = ["load_settings"]
