"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import httpx

    from streamscribe.state.settings import AppSettings
    from streamscribe.handlers.connections import ConnectionManager
    from streamscribe.transcription.coordinator import StreamingCoordinator


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    coordinator: StreamingCoordinator
    settings: AppSettings
    _http_client: httpx.AsyncClient | None = None

    async def shutdown(self) -> None:
        try:
            await self.coordinator.aclose()
        except Exception:
            logger.exception("coordinator shutdown failed")
        if self._http_client is None:
            return
        try:
            await self._http_client.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
