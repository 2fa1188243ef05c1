import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

from alac.core.common.enums import Direction
from alac.core.config.settings import settings
from alac.core.errors import FfmpegNotInstalled
from ..domain.interfaces import ITranscoder, ITranscoderLocator
from ..domain.models import TranscodeResult

logger = logging.getLogger(__name__)

class FFmpegLocator(ITranscoderLocator):
    """
    Resolves ffmpeg from a fixed path (settings.FFMPEG_BINARY by default).
    """

    def __init__(self, binary: Optional[Path] = None):
        self.binary = Path(binary) if binary else settings.FFMPEG_BINARY

    def locate(self) -> Path:
        if not self.binary.is_file() or not os.access(self.binary, os.X_OK):
            raise FfmpegNotInstalled(self.binary)
        return self.binary

class FFmpegTranscoder(ITranscoder):
    """
    Concrete implementation of ITranscoder using an ffmpeg subprocess.
    Copies cover art / video streams and global tags, re-encodes audio only.
    """

    @staticmethod
    def build_command(executable: Path, input_path: Path, output_path: Path, direction: Direction) -> List[str]:
        # -nostdin: never wait on the terminal (also makes an existing output a hard failure)
        # -map_metadata 0: carry the input's tags over
        # -c:v copy: embedded artwork is a video stream, keep it verbatim
        return [
            str(executable),
            "-nostdin",
            "-i", str(input_path),
            "-map_metadata", "0",
            "-c:v", "copy",
            "-c:a", direction.audio_codec,
            str(output_path),
        ]

    def run_transcode(self,
                      executable: Path,
                      input_path: Path,
                      output_path: Path,
                      direction: Direction,
                      timeout: Optional[float] = None) -> TranscodeResult:
        cmd = self.build_command(executable, input_path, output_path, direction)
        logger.debug(f"Executing FFmpeg: {' '.join(cmd)}")

        # capture_output keeps ffmpeg's chatter off the console but lets us log it on failure
        completed = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
        return TranscodeResult(returncode=completed.returncode, stderr=completed.stderr or "")
