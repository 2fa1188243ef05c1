from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from alac.core.common.enums import Direction
from alac.features.conversion.domain.models import ConversionOutcome, FileTask

# A contiguous slice of the scanned file list handed to one worker
Chunk = List[FileTask]

@dataclass(frozen=True)
class JobRequest:
    """
    Everything the user asked for on the command line.
    Built once, never mutated.
    """
    input_path: Path
    direction: Direction = Direction.FORWARD
    threads: int = 1
    recursive: bool = False

@dataclass
class BatchSummary:
    """
    Report returned after a batch completes.
    """
    total: int = 0
    outcomes: List[ConversionOutcome] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def converted(self) -> int:
        return sum(1 for o in self.outcomes if o.converted)

    @property
    def failures(self) -> List[ConversionOutcome]:
        return [o for o in self.outcomes if not o.converted]

    @property
    def not_trashed(self) -> List[ConversionOutcome]:
        return [o for o in self.outcomes if o.converted and not o.trashed]

    @property
    def succeeded(self) -> bool:
        return not self.failures
