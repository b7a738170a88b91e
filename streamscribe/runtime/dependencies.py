"""Runtime dependency construction (provider client + coordinator + admission control)."""

from __future__ import annotations

import logging

import httpx

from streamscribe.state import RuntimeDeps
from streamscribe.state.settings import AppSettings
from streamscribe.handlers.connections import ConnectionManager
from streamscribe.transcription.whisper_api import WhisperApiClient
from streamscribe.transcription.coordinator import StreamingCoordinator

from .settings import load_settings

logger = logging.getLogger(__name__)

# Only connecting is bounded here; the dispatcher bounds each whole call.
_HTTP_CONNECT_TIMEOUT_S = 10.0


def build_http_client(settings: AppSettings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.provider.base_url,
        timeout=httpx.Timeout(None, connect=_HTTP_CONNECT_TIMEOUT_S),
    )


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    if not settings.provider.api_key:
        logger.warning("OPENAI_API_KEY is not set; provider requests will likely be rejected")

    http_client = build_http_client(settings)
    provider = WhisperApiClient(
        http_client,
        api_key=settings.provider.api_key,
        model=settings.provider.model,
        language=settings.provider.language,
    )

    coordinator = StreamingCoordinator(
        provider=provider,
        settings=settings.streaming,
        content_type=settings.provider.content_type,
    )
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)

    logger.info(
        "runtime: provider=%s model=%s window=%d timeout=%.1fs",
        settings.provider.base_url,
        settings.provider.model,
        settings.streaming.partial_window,
        settings.streaming.provider_timeout_s,
    )

    return RuntimeDeps(
        connections=connections,
        coordinator=coordinator,
        settings=settings,
        _http_client=http_client,
    )


__all__ = ["RuntimeDeps", "build_http_client", "build_runtime_deps"]
