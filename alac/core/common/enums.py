# File: alac/core/common/enums.py

from enum import Enum, unique
from pathlib import Path


@unique
class Direction(str, Enum):
    """
    Which way a batch converts.
    FORWARD: FLAC -> ALAC (.m4a), REVERT: ALAC (.m4a) -> FLAC.
    """
    FORWARD = "forward"
    REVERT = "revert"

    @classmethod
    def from_flag(cls, revert: bool) -> "Direction":
        return cls.REVERT if revert else cls.FORWARD

    @property
    def source_extension(self) -> str:
        return "m4a" if self is Direction.REVERT else "flac"

    @property
    def target_extension(self) -> str:
        return "flac" if self is Direction.REVERT else "m4a"

    @property
    def audio_codec(self) -> str:
        """ffmpeg encoder name for the output audio stream."""
        return "flac" if self is Direction.REVERT else "alac"

    @property
    def label(self) -> str:
        return "FLAC" if self is Direction.REVERT else "ALAC"

    def matches_source(self, path: Path) -> bool:
        """Case-insensitive check of a path's extension against the expected input."""
        return path.suffix.lower() == f".{self.source_extension}"
