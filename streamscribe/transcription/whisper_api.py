"""Client for OpenAI-compatible `/audio/transcriptions` endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from streamscribe.errors import ProviderError

logger = logging.getLogger(__name__)

_TRANSCRIPTIONS_PATH = "audio/transcriptions"


class WhisperApiClient:
    """Thin wrapper around one multipart transcription call.

    Does not retry and does not bound its own latency; the dispatcher owns
    both. Every failure surfaces as `ProviderError`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_key: str,
        model: str,
        language: str = "",
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._model = model
        self._language = language

    def _headers(self) -> dict[str, str]:
        if not self._api_key:
            return {}
        return {"Authorization": f"Bearer {self._api_key}"}

    async def transcribe(self, audio: bytes, content_type: str, *, filename: str = "audio.webm") -> str:
        files = {"file": (filename, audio, content_type)}
        data: dict[str, Any] = {"model": self._model}
        if self._language:
            data["language"] = self._language

        try:
            response = await self._client.post(
                _TRANSCRIPTIONS_PATH,
                files=files,
                data=data,
                headers=self._headers(),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(f"provider returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"provider request failed ({type(exc).__name__})") from exc
        except ValueError as exc:
            raise ProviderError("provider returned a non-JSON response") from exc

        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str):
            raise ProviderError("provider response has no 'text' field")
        return text


__all__ = ["WhisperApiClient"]
