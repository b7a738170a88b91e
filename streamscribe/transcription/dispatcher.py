"""Per-session provider dispatch.

Each session gets one `SessionDispatcher`: a FIFO queue drained by a single
worker task. A request submitted while another is in flight waits behind it,
so at most one provider call per session is outstanding and outbound messages
leave in submission order. Notices (client-visible errors raised while
classifying input) travel through the same queue to keep that ordering.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

from streamscribe.errors import ProviderError
from streamscribe.config.websocket import WS_ERROR_PROCESS_FAILED
from streamscribe.state import Session, TranscriptionRequest

from .base import TranscriptionProvider
from .messages import build_error_message, build_transcription_message, build_provider_error_message

logger = logging.getLogger(__name__)

SendFn = Callable[[dict[str, Any]], Awaitable[bool]]
FinalFn = Callable[[str], None]

_QueueItem = TranscriptionRequest | dict[str, Any] | None


def _file_extension(content_type: str) -> str:
    subtype = content_type.split(";", 1)[0].split("/")[-1].strip()
    return subtype or "bin"


class SessionDispatcher:
    def __init__(
        self,
        session: Session,
        *,
        provider: TranscriptionProvider,
        send: SendFn,
        content_type: str,
        timeout_s: float,
        on_final: FinalFn | None = None,
    ) -> None:
        self._session = session
        self._provider = provider
        self._send = send
        self._content_type = content_type
        self._extension = _file_extension(content_type)
        self._timeout_s = float(timeout_s)
        self._on_final = on_final
        self._queue: asyncio.Queue[_QueueItem] = asyncio.Queue()
        self._pending = 0
        self._closed = False
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> int:
        """Requests and notices queued or in flight."""
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._run(), name=f"dispatch-{self._session.id}")
        return self._task

    def dispatch(self, payload: bytes, *, is_final: bool) -> TranscriptionRequest:
        request = TranscriptionRequest(
            seq=self._session.next_request_seq(),
            is_final=is_final,
            payload=payload,
        )
        self._enqueue(request)
        logger.debug(
            "provider request queued session_id=%s seq=%d kind=%s pending=%d",
            self._session.id,
            request.seq,
            request.kind,
            self._pending,
        )
        return request

    def notify(self, message: dict[str, Any]) -> None:
        self._enqueue(message)

    def close_when_idle(self) -> None:
        """Stop accepting work; the worker exits after draining the queue."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(None)

    async def aclose(self) -> None:
        """Discard queued work and cancel any in-flight provider call."""
        self._closed = True
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def _enqueue(self, item: TranscriptionRequest | dict[str, Any]) -> None:
        if self._closed:
            raise RuntimeError(f"dispatcher for session '{self._session.id}' is closed")
        self._pending += 1
        self._queue.put_nowait(item)

    async def _run(self) -> None:
        while True:
            item = await self._queue.get()
            if item is None:
                return
            try:
                if isinstance(item, TranscriptionRequest):
                    await self._process(item)
                else:
                    await self._send(item)
            finally:
                self._pending -= 1

    async def _call_provider(self, request: TranscriptionRequest) -> str:
        filename = f"{self._session.id}-{request.seq}.{self._extension}"
        try:
            return await asyncio.wait_for(
                self._provider.transcribe(request.payload, self._content_type, filename=filename),
                timeout=self._timeout_s,
            )
        except TimeoutError as exc:
            raise ProviderError(f"provider did not respond within {self._timeout_s:g}s") from exc

    async def _process(self, request: TranscriptionRequest) -> None:
        session = self._session
        logger.info(
            "provider request submitted session_id=%s seq=%d kind=%s bytes=%d",
            session.id,
            request.seq,
            request.kind,
            len(request.payload),
        )
        try:
            text = await self._call_provider(request)
        except ProviderError as exc:
            logger.warning(
                "provider request failed session_id=%s seq=%d kind=%s: %s",
                session.id,
                request.seq,
                request.kind,
                exc.cause,
            )
            self._after_failure(request)
            await self._send(build_provider_error_message(exc.cause, is_final=request.is_final))
            return
        except Exception:
            logger.exception(
                "unexpected error during provider request session_id=%s seq=%d kind=%s",
                session.id,
                request.seq,
                request.kind,
            )
            self._after_failure(request)
            await self._send(build_error_message(WS_ERROR_PROCESS_FAILED))
            return

        logger.info(
            "provider request completed session_id=%s seq=%d kind=%s chars=%d",
            session.id,
            request.seq,
            request.kind,
            len(text),
        )

        if request.is_final:
            # The final transcript is the provider's own pass over the whole
            # recording; partial text is never folded into it.
            await self._send(build_transcription_message(text, is_final=True))
            if self._on_final is not None:
                self._on_final(session.id)
            return

        self._merge_partial(text)
        await self._send(build_transcription_message(session.running_transcript, is_final=False))

    def _merge_partial(self, text: str) -> None:
        session = self._session
        if session.partial_count:
            session.running_transcript = f"{session.running_transcript} {text}"
        else:
            session.running_transcript = text
        session.partial_count += 1

    def _after_failure(self, request: TranscriptionRequest) -> None:
        if request.is_final:
            # Audio stays buffered but is not resubmitted; a fresh stop retries.
            self._session.finalizing = False


__all__ = ["FinalFn", "SendFn", "SessionDispatcher"]
