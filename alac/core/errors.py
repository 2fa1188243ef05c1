# File: alac/core/errors.py

from pathlib import Path
from typing import Optional


class AlacError(Exception):
    """
    Base class for every error the CLI knows how to render.
    Each subclass carries a one-line message and the process exit code.
    """
    exit_code: int = 1
    message: str = "Unknown error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def description(self) -> str:
        return str(self)


class FfmpegNotInstalled(AlacError):
    exit_code = 3

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        if path is None:
            super().__init__("ffmpeg is not installed.")
        else:
            super().__init__(f"ffmpeg is not installed (looked for {path}).")


class InvalidFileOrFolder(AlacError):
    exit_code = 2
    message = "The specified file or folder is invalid."


class NoAudioFilesFound(AlacError):
    exit_code = 4

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"The specified folder contains no .{extension} file/s.")


class ImproperThreadsUsage(AlacError):
    exit_code = 2
    message = "The --threads <threads> option can only be used on folders."


class OutsideThreadsRange(AlacError):
    exit_code = 2
    message = "Outside expected threads range. Only use a number 1 - 4."


class ImproperRecursiveUsage(AlacError):
    exit_code = 2
    message = "The --recursive flag can only be used for folders."


class ConversionFailed(AlacError):
    exit_code = 1

    def __init__(self, extension: str, source: Optional[Path] = None):
        self.extension = extension
        self.source = source
        super().__init__(
            f"The conversion failed. Please check that your .{extension} files are valid."
        )
