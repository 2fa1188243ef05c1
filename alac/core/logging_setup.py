# File: alac/core/logging_setup.py

import logging
import sys
from typing import Optional

from alac.core.config.settings import settings

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(levelname)s - %(threadName)s - %(name)s - %(message)s"


def setup_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """
    Configures the root logger for CLI use.
    Console stays at WARNING by default so the progress bar is readable;
    --verbose switches to DEBUG with thread names for multi-worker runs.
    """
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName(level or settings.LOG_LEVEL)
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logging.basicConfig(
        stream=sys.stderr,
        level=resolved,
        format=VERBOSE_FORMAT if verbose else CONSOLE_FORMAT,
        force=True,
    )
    logging.getLogger(__name__).debug(f"Logging initialised at {logging.getLevelName(resolved)}")
