import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from tqdm.contrib.logging import logging_redirect_tqdm

from alac.features.conversion.domain.models import ConversionOutcome, FileTask
from alac.features.conversion.service.worker import ConversionWorker, OutcomeCallback
from alac.features.scanner.domain.models import ScanRequest
from alac.features.scanner.service.scanner import AudioScanner

from ..domain.models import BatchSummary, JobRequest
from .partitioner import partition
from .progress import ProgressReporter
from .validator import validate_request

logger = logging.getLogger(__name__)

class BatchCoordinator:
    """
    Runs a whole batch: validate, scan, split across workers, wait for all.

    Per-file failures never stop the batch, in single- or multi-threaded mode;
    they come back as failed outcomes in the BatchSummary.
    """

    def __init__(self,
                 worker: Optional[ConversionWorker] = None,
                 scanner: Optional[AudioScanner] = None,
                 show_progress: bool = True):
        self.worker = worker or ConversionWorker()
        self.scanner = scanner or AudioScanner()
        self.show_progress = show_progress

    def run(self, request: JobRequest) -> BatchSummary:
        """
        Raises:
            InvalidFileOrFolder, ImproperThreadsUsage, ImproperRecursiveUsage,
            OutsideThreadsRange: Rejected arguments (nothing touched).
            NoAudioFilesFound: Nothing to convert.
            FfmpegNotInstalled: Pre-flight check failed (nothing touched).
        """
        # 1. Gate the arguments
        validate_request(request)

        # 2. Collect work
        tasks = self.scanner.scan(
            ScanRequest(
                root_path=request.input_path,
                direction=request.direction,
                recursive=request.recursive,
            )
        )

        # 3. Fail once up front instead of once per file
        executable = self.worker.locator.locate()
        logger.debug(f"Using transcoder at {executable}")

        # 4. Dispatch
        started = time.monotonic()
        with logging_redirect_tqdm():
            with ProgressReporter(len(tasks), f"To {request.direction.label}", self.show_progress) as progress:

                def on_outcome(outcome: ConversionOutcome) -> None:
                    progress.advance(outcome.task.source_path.name)

                if request.threads == 1:
                    outcomes = self.worker.process_chunk(tasks, on_outcome)
                else:
                    outcomes = self._run_concurrently(tasks, request.threads, on_outcome)

        summary = BatchSummary(
            total=len(tasks),
            outcomes=outcomes,
            elapsed_seconds=time.monotonic() - started,
        )
        logger.info(
            f"Batch complete. Converted {summary.converted}/{summary.total} "
            f"in {summary.elapsed_seconds:.1f}s ({len(summary.failures)} failed)."
        )
        return summary

    def _run_concurrently(self,
                          tasks: List[FileTask],
                          threads: int,
                          on_outcome: OutcomeCallback) -> List[ConversionOutcome]:
        chunks = partition(tasks, threads)
        logger.info(f"Split {len(tasks)} file(s) into chunks of {[len(c) for c in chunks]}")

        with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="alac-worker") as pool:
            # Empty chunks (fewer files than threads) get no worker
            futures = [
                pool.submit(self.worker.process_chunk, chunk, on_outcome)
                for chunk in chunks
                if chunk
            ]

            # Chunk order == discovery order, so results stay in scan order
            outcomes: List[ConversionOutcome] = []
            for future in futures:
                outcomes.extend(future.result())

        return outcomes
