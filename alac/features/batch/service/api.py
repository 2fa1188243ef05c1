from pathlib import Path

from alac.core.common.enums import Direction
from ..domain.models import BatchSummary, JobRequest
from .coordinator import BatchCoordinator

def convert_path(input_path: str,
                 revert: bool = False,
                 threads: int = 1,
                 recursive: bool = False,
                 show_progress: bool = True) -> BatchSummary:
    """
    Public Service API: convert a file or folder between FLAC and ALAC.

    Args:
        input_path: File or folder to process.
        revert: Convert .m4a (ALAC) back to .flac instead of .flac to .m4a.
        threads: Number of workers (folders only, 1 - 4).
        recursive: Include sub-folders (folders only).
        show_progress: Draw the progress bar on stderr.
    """
    # 1. Map Primitives to Domain Objects
    request = JobRequest(
        input_path=Path(input_path).expanduser(),
        direction=Direction.from_flag(revert),
        threads=threads,
        recursive=recursive,
    )

    # 2. Execute
    return BatchCoordinator(show_progress=show_progress).run(request)
