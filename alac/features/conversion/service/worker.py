import logging
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from alac.core.config.settings import settings
from alac.core.errors import AlacError, ConversionFailed

from ..domain.interfaces import ITranscoder, ITranscoderLocator, ITrashBin
from ..domain.models import ConversionOutcome, FileTask
from ..data.ffmpeg_adapter import FFmpegLocator, FFmpegTranscoder
from ..data.trash import Send2TrashBin

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[ConversionOutcome], None]

class ConversionWorker:
    """
    Converts files one at a time: locate ffmpeg, transcode, verify, trash the source.
    Collaborators are injectable so tests never need a real ffmpeg.
    """

    def __init__(self,
                 locator: Optional[ITranscoderLocator] = None,
                 transcoder: Optional[ITranscoder] = None,
                 trash_bin: Optional[ITrashBin] = None,
                 timeout: Optional[float] = None):
        self.locator = locator or FFmpegLocator()
        self.transcoder = transcoder or FFmpegTranscoder()
        self.trash_bin = trash_bin or Send2TrashBin()
        self.timeout = timeout if timeout is not None else settings.TRANSCODE_TIMEOUT

    def convert(self, task: FileTask) -> ConversionOutcome:
        """
        Converts a single file.

        Returns:
            ConversionOutcome with converted=True; trashed tells whether cleanup worked.

        Raises:
            FfmpegNotInstalled: The transcoder could not be located.
            ConversionFailed: Non-zero exit, missing output, launch error or timeout.
                              The source file is left untouched.
        """
        # 1. Locate the transcoder (cheap, so checked on every call)
        executable = self.locator.locate()

        # 2. Output lives next to the input
        source = task.source_path
        target = task.target_path
        direction = task.direction
        target_existed = target.exists()

        # 3. Transcode
        logger.info(f"Converting {source} to {direction.label}...")
        try:
            result = self.transcoder.run_transcode(
                executable, source, target, direction, timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"FFmpeg timed out after {e.timeout}s on {source}")
            self._discard_partial(target, target_existed)
            raise ConversionFailed(direction.source_extension, source) from e
        except OSError as e:
            logger.error(f"Failed to run FFmpeg on {source}: {e}")
            self._discard_partial(target, target_existed)
            raise ConversionFailed(direction.source_extension, source) from e

        # 4. Both conditions are required, ffmpeg can exit 0 without writing anything
        if not result.succeeded or not target.exists():
            logger.error(
                f"FFmpeg failed on {source} (exit {result.returncode}, "
                f"output exists: {target.exists()}). STDERR: {result.stderr.strip()}"
            )
            self._discard_partial(target, target_existed)
            raise ConversionFailed(direction.source_extension, source)

        # 5. Best-effort cleanup; never undoes the conversion
        logger.info(f"Moving input {direction.source_extension} to trash...")
        try:
            self.trash_bin.trash(source)
            trashed = True
        except Exception as e:
            logger.warning(f"Failed to move {source} to trash: {e}")
            trashed = False

        return ConversionOutcome(task=task, converted=True, trashed=trashed)

    @staticmethod
    def _discard_partial(target: Path, target_existed: bool) -> None:
        """Removes a half-written output from this run. Outputs that were already there are kept."""
        if target_existed or not target.exists():
            return
        logger.warning(f"Removing partial output {target}")
        target.unlink(missing_ok=True)

    def process_chunk(self,
                      chunk: Iterable[FileTask],
                      on_outcome: Optional[OutcomeCallback] = None) -> List[ConversionOutcome]:
        """
        Converts every task in order. A failing file is recorded and the loop moves on.
        """
        outcomes: List[ConversionOutcome] = []

        for task in chunk:
            try:
                outcome = self.convert(task)
            except AlacError as e:
                logger.error(f"Skipping {task.source_path.name}: {e}")
                outcome = ConversionOutcome.failed(task, e)
            except Exception:
                logger.exception(f"Unexpected error converting {task.source_path}")
                outcome = ConversionOutcome.failed(
                    task, ConversionFailed(task.direction.source_extension, task.source_path)
                )

            outcomes.append(outcome)
            if on_outcome:
                on_outcome(outcome)

        return outcomes
