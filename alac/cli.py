# File: alac/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from alac.core.common.enums import Direction
from alac.core.errors import AlacError, ConversionFailed
from alac.core.logging_setup import setup_logging
from alac.features.batch.domain.models import BatchSummary, JobRequest
from alac.features.batch.service.coordinator import BatchCoordinator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERNAL_ERROR = 70


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alac",
        description="Convert FLAC files to ALAC (.m4a) with ffmpeg, or back with --revert. "
                    "Converted originals are moved to the trash.",
    )
    parser.add_argument("input", help="File or folder to process.")
    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Number of jobs to run simultaneously (1 - 4). Folders only.",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Process all flacs/m4as (alacs) in the folder tree.",
    )
    parser.add_argument(
        "--revert",
        action="store_true",
        help="Convert .m4as (alacs) back to .flacs.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    return parser


def request_from_args(args: argparse.Namespace) -> JobRequest:
    return JobRequest(
        input_path=Path(args.input).expanduser(),
        direction=Direction.from_flag(args.revert),
        threads=args.threads,
        recursive=args.recursive,
    )


def report(summary: BatchSummary) -> int:
    """Prints the end-of-run summary and returns the exit code."""
    print("Done")

    for outcome in summary.not_trashed:
        print(f"Warning: converted but could not trash {outcome.task.source_path}")

    if summary.succeeded:
        return EXIT_OK

    print(f"{len(summary.failures)} of {summary.total} file(s) failed:")
    for outcome in summary.failures:
        print(f"  {outcome.task.source_path}: {outcome.error}")
    return ConversionFailed.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        summary = BatchCoordinator().run(request_from_args(args))
    except AlacError as e:
        print(f"Error: {e.description}")
        return e.exit_code
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"Unknown error: {e}")
        return EXIT_INTERNAL_ERROR

    return report(summary)


if __name__ == "__main__":
    sys.exit(main())
