"""Speech-to-text provider configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_str

OPENAI_BASE_URL: str = get_str("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/")

STT_MODEL: str = get_str("STT_MODEL", "whisper-1")

# Optional ISO-639-1 hint; empty lets the provider detect the language.
STT_LANGUAGE: str = get_str("STT_LANGUAGE")

# Container negotiated by the browser recorder. Fragments are concatenated
# as-is, never decoded, so this is only forwarded to the provider.
STT_CONTENT_TYPE: str = get_str("STT_CONTENT_TYPE", "audio/webm")

__all__ = [
    "OPENAI_BASE_URL",
    "STT_CONTENT_TYPE",
    "STT_LANGUAGE",
    "STT_MODEL",
]
