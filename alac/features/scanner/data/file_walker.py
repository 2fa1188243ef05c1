import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.walk.
    Always walks the whole tree; the scanner decides what "non-recursive" keeps.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            # Sorting in-place fixes the order os.walk descends in
            dirnames.sort()

            for filename in sorted(filenames):
                file_path = Path(dirpath) / filename
                if file_path.is_file():
                    yield file_path
