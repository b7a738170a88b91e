"""Configuration module exports (env-resolved constants only).

A `.env` file is loaded before any submodule reads the environment.
"""

from .env import load_env_file

load_env_file()

from .limits import (  # noqa: E402
    MAX_CONCURRENT_CONNECTIONS,
)
from .streaming import STT_PARTIAL_WINDOW  # noqa: E402

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "STT_PARTIAL_WINDOW",
]
