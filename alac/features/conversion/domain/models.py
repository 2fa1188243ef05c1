from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alac.core.common.enums import Direction
from alac.core.errors import AlacError

@dataclass(frozen=True)
class FileTask:
    """
    One source file to convert.
    The output path is implied: same folder and stem, extension swapped.
    """
    source_path: Path
    direction: Direction

    @property
    def target_path(self) -> Path:
        return self.source_path.with_suffix(f".{self.direction.target_extension}")

@dataclass(frozen=True)
class TranscodeResult:
    """
    What came back from one transcoder run.
    """
    returncode: int
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

@dataclass(frozen=True)
class ConversionOutcome:
    """
    Per-file result handed back to the coordinator.
    A converted file whose source could not be trashed is still a success.
    """
    task: FileTask
    converted: bool
    trashed: bool = False
    error: Optional[AlacError] = None

    @classmethod
    def failed(cls, task: FileTask, error: AlacError) -> "ConversionOutcome":
        return cls(task=task, converted=False, trashed=False, error=error)
