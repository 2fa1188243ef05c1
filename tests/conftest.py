# File: tests/conftest.py

import os
import sys
import threading
from pathlib import Path
from types import SimpleNamespace
from typing import Optional

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from alac.core.errors import FfmpegNotInstalled
from alac.features.conversion.domain.interfaces import ITranscoder, ITranscoderLocator, ITrashBin
from alac.features.conversion.domain.models import TranscodeResult
from alac.features.conversion.service.worker import ConversionWorker


class FakeLocator(ITranscoderLocator):
    def __init__(self, installed: bool = True):
        self.installed = installed
        self.calls = 0

    def locate(self) -> Path:
        self.calls += 1
        if not self.installed:
            raise FfmpegNotInstalled(Path("/nowhere/ffmpeg"))
        return Path("/fake/bin/ffmpeg")


class FakeTranscoder(ITranscoder):
    """
    Pretends to be ffmpeg: writes the output file unless told otherwise.
    fail_names: exit 1, no output. silent_names: exit 0, no output.
    errors: file name -> exception raised instead of running.
    partial_names: a truncated output is written before failing or raising.
    """

    def __init__(self, fail_names=(), silent_names=(), errors=None, partial_names=()):
        self.fail_names = set(fail_names)
        self.silent_names = set(silent_names)
        self.errors = dict(errors or {})
        self.partial_names = set(partial_names)
        self.calls = []
        self.timeouts = []
        self.threads = set()
        self._lock = threading.Lock()

    def run_transcode(self, executable, input_path, output_path, direction, timeout: Optional[float] = None):
        with self._lock:
            self.calls.append((input_path, output_path, direction))
            self.timeouts.append(timeout)
            self.threads.add(threading.current_thread().name)

        if input_path.name in self.partial_names:
            output_path.write_bytes(b"TRUNCATED")
        if input_path.name in self.errors:
            raise self.errors[input_path.name]
        if input_path.name in self.fail_names:
            return TranscodeResult(returncode=1, stderr="Invalid data found when processing input")
        if input_path.name not in self.silent_names:
            output_path.write_bytes(b"CONVERTED:" + input_path.read_bytes())
        return TranscodeResult(returncode=0)


class FakeTrashBin(ITrashBin):
    """Moves files into a local folder so tests can check what was trashed."""

    def __init__(self, trash_dir: Path, broken: bool = False):
        self.trash_dir = trash_dir
        self.broken = broken
        self.trashed = []

    def trash(self, path: Path) -> None:
        if self.broken:
            raise PermissionError(f"Trash not writable for {path}")
        self.trash_dir.mkdir(parents=True, exist_ok=True)
        path.rename(self.trash_dir / f"{len(self.trashed)}-{path.name}")
        self.trashed.append(path)


@pytest.fixture
def fake_locator():
    return FakeLocator()


@pytest.fixture
def fake_transcoder():
    return FakeTranscoder()


@pytest.fixture
def fake_trash(tmp_path):
    return FakeTrashBin(tmp_path / ".trash")


@pytest.fixture
def fake_worker(fake_locator, fake_transcoder, fake_trash):
    return ConversionWorker(locator=fake_locator, transcoder=fake_transcoder, trash_bin=fake_trash)


@pytest.fixture
def music_library(tmp_path):
    """
    Creates a small nested library:
    - library/a.flac, library/b.FLAC, library/c.m4a, library/cover.jpg
    - library/disc2/d.flac, library/disc2/e.m4a
    - library/disc2/bonus/f.flac
    """
    root = tmp_path / "library"
    (root / "disc2" / "bonus").mkdir(parents=True)

    for rel in ["a.flac", "b.FLAC", "c.m4a", "cover.jpg",
                "disc2/d.flac", "disc2/e.m4a", "disc2/bonus/f.flac"]:
        (root / rel).write_bytes(f"FAKE_AUDIO {rel}".encode())

    return root


@pytest.fixture
def flat_album(tmp_path):
    """A folder holding ten .flac tracks and nothing else."""
    root = tmp_path / "album"
    root.mkdir()
    for i in range(1, 11):
        (root / f"track{i:02d}.flac").write_bytes(f"FAKE_AUDIO {i}".encode())
    return root


@pytest.fixture
def fakes():
    """The fake collaborator classes, for tests that need custom instances."""
    return SimpleNamespace(Locator=FakeLocator, Transcoder=FakeTranscoder, TrashBin=FakeTrashBin)
