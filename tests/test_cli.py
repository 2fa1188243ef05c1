import logging

import pytest

from alac import cli
from alac.features.batch.service.coordinator import BatchCoordinator

@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

@pytest.fixture
def use_worker(monkeypatch):
    """Makes the CLI build its coordinator around the given worker."""
    def install(worker):
        monkeypatch.setattr(cli, "BatchCoordinator", lambda: BatchCoordinator(worker=worker, show_progress=False))
    return install

def test_parser_defaults():
    args = cli.build_parser().parse_args(["music"])
    assert (args.threads, args.recursive, args.revert, args.verbose) == (1, False, False, False)

    request = cli.request_from_args(cli.build_parser().parse_args(["music", "--revert", "--threads", "3", "--recursive"]))
    assert request.direction.value == "revert"
    assert request.threads == 3 and request.recursive

def test_successful_run_prints_done(flat_album, fake_worker, use_worker, capsys):
    use_worker(fake_worker)

    code = cli.main([str(flat_album), "--threads", "2"])

    assert code == 0
    assert "Done" in capsys.readouterr().out

def test_file_with_threads_is_a_usage_error(tmp_path, fake_worker, fake_transcoder, use_worker, capsys):
    song = tmp_path / "song.flac"
    song.write_bytes(b"x")
    use_worker(fake_worker)

    code = cli.main([str(song), "--threads", "2"])

    out = capsys.readouterr().out
    assert code == 2
    assert out.strip() == "Error: The --threads <threads> option can only be used on folders."
    assert fake_transcoder.calls == []

def test_outside_threads_range(flat_album, fake_worker, use_worker, capsys):
    use_worker(fake_worker)

    assert cli.main([str(flat_album), "--threads", "5"]) == 2
    assert "Only use a number 1 - 4" in capsys.readouterr().out

def test_no_audio_files(tmp_path, fake_worker, use_worker, capsys):
    use_worker(fake_worker)

    assert cli.main([str(tmp_path), "--revert"]) == 4
    assert "contains no .m4a file/s" in capsys.readouterr().out

def test_missing_ffmpeg(flat_album, fakes, fake_transcoder, fake_trash, use_worker, capsys):
    from alac.features.conversion.service.worker import ConversionWorker
    use_worker(ConversionWorker(fakes.Locator(installed=False), fake_transcoder, fake_trash))

    assert cli.main([str(flat_album)]) == 3
    assert "ffmpeg is not installed" in capsys.readouterr().out

def test_partial_failure_still_prints_done(flat_album, fakes, fake_locator, fake_trash, use_worker, capsys):
    from alac.features.conversion.service.worker import ConversionWorker
    transcoder = fakes.Transcoder(fail_names={"track03.flac"})
    use_worker(ConversionWorker(fake_locator, transcoder, fake_trash))

    code = cli.main([str(flat_album), "--threads", "4"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Done" in out
    assert "1 of 10 file(s) failed" in out
    assert "track03.flac" in out

def test_unexpected_errors_are_reported_without_traceback(monkeypatch, tmp_path, capsys):
    class Exploding:
        def run(self, request):
            raise RuntimeError("disk on fire")

    monkeypatch.setattr(cli, "BatchCoordinator", Exploding)

    assert cli.main([str(tmp_path)]) == cli.EXIT_INTERNAL_ERROR
    out = capsys.readouterr().out
    assert out.strip() == "Unknown error: disk on fire"

def test_non_numeric_threads_rejected_by_argparse(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path), "--threads", "many"])
    assert exc.value.code == 2
