"""Secrets configuration."""

from __future__ import annotations

import os

OPENAI_API_KEY: str = (os.getenv("OPENAI_API_KEY") or "").strip()

__all__ = ["OPENAI_API_KEY"]
