"""Streaming transcription coordinator: session lifecycle and segmentation policy."""

from __future__ import annotations

import uuid
import logging
from typing import Any
from collections.abc import Callable

from streamscribe.state import Session
from streamscribe.state.settings import StreamingSettings
from streamscribe.errors import MalformedControlMessage
from streamscribe.config.websocket import WS_ERROR_PROCESS_FAILED

from .store import SessionStore
from .base import TranscriptionProvider
from .messages import build_error_message
from .dispatcher import SendFn, SessionDispatcher
from .segmentation import classify_message, should_trigger_partial

logger = logging.getLogger(__name__)


def _new_session_id() -> str:
    return uuid.uuid4().hex


class StreamingCoordinator:
    """Routes inbound frames for every open connection.

    Sessions share nothing: each has its own `Session` in the store and its
    own `SessionDispatcher`. All cleanup paths go through `store.remove`,
    which is a no-op for a session that is already gone.
    """

    def __init__(
        self,
        *,
        provider: TranscriptionProvider,
        settings: StreamingSettings,
        content_type: str,
        store: SessionStore | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._provider = provider
        self._window = max(1, int(settings.partial_window))
        self._timeout_s = float(settings.provider_timeout_s)
        self._max_audio_bytes = max(0, int(settings.max_session_audio_bytes))
        self._content_type = content_type
        self._store = store if store is not None else SessionStore()
        self._id_factory = id_factory or _new_session_id
        self._dispatchers: dict[str, SessionDispatcher] = {}

    @property
    def store(self) -> SessionStore:
        return self._store

    def open_session(self, send: SendFn) -> Session:
        session = self._store.create(self._id_factory())
        dispatcher = SessionDispatcher(
            session,
            provider=self._provider,
            send=send,
            content_type=self._content_type,
            timeout_s=self._timeout_s,
            on_final=self._complete_session,
        )
        self._dispatchers[session.id] = dispatcher
        dispatcher.start()
        logger.info("session opened session_id=%s active=%d", session.id, len(self._store))
        return session

    def is_busy(self, session_id: str) -> bool:
        dispatcher = self._dispatchers.get(session_id)
        return dispatcher is not None and dispatcher.pending > 0

    def handle_message(self, session_id: str, data: bytes) -> None:
        """Classify and apply one inbound frame. Never blocks on the provider."""
        session = self._store.get(session_id)
        dispatcher = self._dispatchers.get(session_id)
        if session is None or dispatcher is None or dispatcher.closed:
            logger.debug("frame for inactive session_id=%s ignored", session_id)
            return

        try:
            message = classify_message(data)
        except MalformedControlMessage as exc:
            logger.info("rejected control message session_id=%s type=%r", session_id, exc.msg_type)
            dispatcher.notify(build_error_message(str(exc)))
            return

        try:
            if message.kind == "stop":
                self._handle_stop(session, dispatcher)
            else:
                self._handle_audio(session, dispatcher, message.audio)
        except Exception:
            logger.exception("failed to process frame session_id=%s", session_id)
            dispatcher.notify(build_error_message(WS_ERROR_PROCESS_FAILED))

    def notify(self, session_id: str, message: dict[str, Any]) -> bool:
        """Queue a client-visible message behind the session's pending output.

        Returns False when the session is no longer accepting work.
        """
        dispatcher = self._dispatchers.get(session_id)
        if dispatcher is None or dispatcher.closed:
            return False
        dispatcher.notify(message)
        return True

    async def close_session(self, session_id: str) -> bool:
        """Discard a session and anything it still has queued.

        Used on disconnect. Returns True only for the call that actually
        removed the session.
        """
        removed = self._store.remove(session_id)
        dispatcher = self._dispatchers.pop(session_id, None)
        if dispatcher is not None:
            await dispatcher.aclose()
        if removed:
            logger.info("session discarded session_id=%s active=%d", session_id, len(self._store))
        return removed

    async def aclose(self) -> None:
        for session_id in list(self._dispatchers):
            await self.close_session(session_id)
        self._store.clear()

    def _handle_audio(self, session: Session, dispatcher: SessionDispatcher, audio: bytes) -> None:
        if session.finalizing:
            logger.debug("fragment after stop dropped session_id=%s bytes=%d", session.id, len(audio))
            return

        limit = self._max_audio_bytes
        if limit and session.audio_bytes + len(audio) > limit:
            if not session.audio_limit_reported:
                session.audio_limit_reported = True
                logger.info("session audio limit reached session_id=%s bytes=%d", session.id, session.audio_bytes)
                dispatcher.notify(
                    build_error_message(f"recording exceeded maximum size of {limit} bytes; send stop to finalize")
                )
            return

        count = session.append_chunk(audio)
        if should_trigger_partial(count, self._window):
            dispatcher.dispatch(session.recent_audio(self._window), is_final=False)

    def _handle_stop(self, session: Session, dispatcher: SessionDispatcher) -> None:
        if session.finalizing:
            logger.debug("duplicate stop ignored session_id=%s", session.id)
            return
        if not session.audio_chunks:
            logger.info("stop with no buffered audio session_id=%s; nothing to transcribe", session.id)
            return
        session.finalizing = True
        dispatcher.dispatch(session.full_audio(), is_final=True)

    def _complete_session(self, session_id: str) -> None:
        if self._store.remove(session_id):
            logger.info("session completed session_id=%s active=%d", session_id, len(self._store))
        dispatcher = self._dispatchers.get(session_id)
        if dispatcher is not None:
            dispatcher.close_when_idle()


__all__ = ["StreamingCoordinator"]
