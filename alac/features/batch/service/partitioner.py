from typing import List, Sequence

from alac.core.config.settings import settings
from alac.core.errors import OutsideThreadsRange
from alac.features.conversion.domain.models import FileTask
from ..domain.models import Chunk

def partition(tasks: Sequence[FileTask], workers: int) -> List[Chunk]:
    """
    Splits tasks into exactly `workers` contiguous chunks.

    Sizes are len // workers or one more; the first len % workers chunks
    get the extra item. Order is preserved, so concatenating the chunks
    gives back the input. Trailing chunks are empty when there are fewer
    tasks than workers.

    Example: 10 tasks over 3 workers -> sizes [4, 3, 3].
    """
    if not settings.MIN_THREADS <= workers <= settings.MAX_THREADS:
        raise OutsideThreadsRange()

    base, remainder = divmod(len(tasks), workers)
    chunks: List[Chunk] = []
    start = 0

    for i in range(workers):
        end = start + base + (1 if i < remainder else 0)
        chunks.append(list(tasks[start:end]))
        start = end

    return chunks
