import logging
from typing import List, Optional

from alac.core.errors import NoAudioFilesFound
from alac.features.conversion.domain.models import FileTask

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class AudioScanner:
    """
    Service responsible for turning a file/folder argument into FileTasks.
    """

    def __init__(self, walker: Optional[IFileWalker] = None):
        self.walker = walker or LocalFileWalker()

    def scan(self, request: ScanRequest) -> List[FileTask]:
        """
        Returns FileTasks in discovery order.

        Raises:
            NoAudioFilesFound: nothing matched the direction's source extension.
        """
        root = request.root_path.resolve()
        direction = request.direction

        if root.is_file():
            # Single-file mode never enumerates the parent directory
            candidates = [root] if direction.matches_source(root) else []
        else:
            logger.info(f"Scanning {root} (recursive={request.recursive}) for .{request.expected_extension} files")
            candidates = [p for p in self.walker.walk(root) if direction.matches_source(p)]

            if not request.recursive:
                candidates = [p for p in candidates if p.parent == root]

        if not candidates:
            raise NoAudioFilesFound(request.expected_extension)

        # a.flac and a.FLAC both map to a.m4a; the first one found wins
        tasks: List[FileTask] = []
        claimed = {}
        for path in candidates:
            task = FileTask(source_path=path, direction=direction)
            owner = claimed.get(task.target_path)
            if owner is not None:
                logger.warning(f"Skipping {path}: {owner.name} already converts to {task.target_path.name}")
                continue
            claimed[task.target_path] = path
            tasks.append(task)

        logger.info(f"Scan complete. Found {len(tasks)} .{request.expected_extension} file(s).")
        return tasks
