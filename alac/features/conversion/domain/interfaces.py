from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from alac.core.common.enums import Direction
from .models import TranscodeResult

class ITranscoderLocator(ABC):
    """
    Contract for finding the transcoder executable.
    Lets tests point the worker at a fake binary.
    """
    @abstractmethod
    def locate(self) -> Path:
        """
        Returns the path of a runnable transcoder.

        Raises:
            FfmpegNotInstalled: If it is missing or not executable.
        """
        pass

class ITranscoder(ABC):
    """
    Contract for running one blocking transcode.
    """
    @abstractmethod
    def run_transcode(self,
                      executable: Path,
                      input_path: Path,
                      output_path: Path,
                      direction: Direction,
                      timeout: Optional[float] = None) -> TranscodeResult:
        """
        Runs the transcoder to completion and reports its exit status.

        Raises:
            OSError: If the process could not be started.
            subprocess.TimeoutExpired: If timeout elapsed (process is killed).
        """
        pass

class ITrashBin(ABC):
    """
    Contract for reversible deletion of a processed source file.
    """
    @abstractmethod
    def trash(self, path: Path) -> None:
        """
        Stages path for deletion in the platform trash.

        Raises:
            OSError: If the file could not be moved.
        """
        pass
