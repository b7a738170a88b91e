from .session import Session
from .runtime import RuntimeDeps
from .inbound import InboundMessage
from .request import TranscriptionRequest
from .settings import AppSettings

__all__ = ["AppSettings", "InboundMessage", "RuntimeDeps", "Session", "TranscriptionRequest"]
