# File: alac/core/config/settings.py

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

# Where Homebrew installs ffmpeg on Apple Silicon
HOMEBREW_FFMPEG = "/opt/homebrew/bin/ffmpeg"

logger = logging.getLogger(__name__)


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, no timeout applied")
        return None


class Settings:
    # --- External Tools ---
    # Env var wins, then PATH, then the well-known Homebrew location
    FFMPEG_BINARY: Path = Path(
        os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or HOMEBREW_FFMPEG)
    )

    # Seconds before a hung ffmpeg is killed. None = wait forever.
    TRANSCODE_TIMEOUT: Optional[float] = _optional_float("ALAC_TRANSCODE_TIMEOUT")

    # --- Worker Pool ---
    MIN_THREADS: int = 1
    MAX_THREADS: int = 4

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("ALAC_LOG_LEVEL", "WARNING").upper()


settings = Settings()
