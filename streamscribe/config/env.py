"""Helpers for reading typed values from the environment."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off", "false"}


def get_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or "").strip() or default


def get_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return float(default)
    try:
        return float(raw)
    except Exception:
        return float(default)


def get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except Exception:
        return int(default)


def load_env_file(path: str | None = None) -> bool:
    """Load a `.env` file into the process environment.

    Without `path` the file is searched for from the working directory
    upwards. Variables already set in the environment are left alone.
    """
    return load_dotenv(path or find_dotenv(usecwd=True), override=False)


__all__ = ["DISABLED_VALUES", "get_float", "get_int", "get_str", "load_env_file"]
