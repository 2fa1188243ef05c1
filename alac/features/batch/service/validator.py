import logging

from alac.core.config.settings import settings
from alac.core.errors import (
    ImproperRecursiveUsage,
    ImproperThreadsUsage,
    InvalidFileOrFolder,
    OutsideThreadsRange,
)
from ..domain.models import JobRequest

logger = logging.getLogger(__name__)

def validate_request(request: JobRequest) -> None:
    """
    Rejects flag combinations that make no sense for the target.
    Runs before anything touches the filesystem or spawns ffmpeg.

    Raises:
        InvalidFileOrFolder: Missing target, or a file with the wrong extension.
        ImproperThreadsUsage: --threads other than 1 on a single file.
        ImproperRecursiveUsage: --recursive on a single file.
        OutsideThreadsRange: --threads outside 1-4 on a folder.
    """
    path = request.input_path

    if not path.exists():
        raise InvalidFileOrFolder()

    if path.is_dir():
        if not settings.MIN_THREADS <= request.threads <= settings.MAX_THREADS:
            raise OutsideThreadsRange()
    else:
        if request.threads != 1:
            raise ImproperThreadsUsage()
        if request.recursive:
            raise ImproperRecursiveUsage()
        if not request.direction.matches_source(path):
            raise InvalidFileOrFolder()

    logger.debug(f"Request validated: {request}")
