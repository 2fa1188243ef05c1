from dataclasses import dataclass
from pathlib import Path

from alac.core.common.enums import Direction
from alac.core.errors import InvalidFileOrFolder

@dataclass(frozen=True)
class ScanRequest:
    """
    Intent to collect convertible files under a path.
    root_path may be a single file or a directory.
    """
    root_path: Path
    direction: Direction
    recursive: bool = False

    def __post_init__(self):
        if not self.root_path.exists():
            raise InvalidFileOrFolder()

    @property
    def expected_extension(self) -> str:
        return self.direction.source_extension
