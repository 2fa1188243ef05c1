from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every file below root (full tree), in a stable order.
        Filtering by extension or depth is the caller's job.
        """
        pass
