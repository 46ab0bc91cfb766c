"""Thin CLI entry point: builds a Job and calls the engine."""

import argparse
import sys
from pathlib import Path

from nippers.engine import process
from nippers.ffutil import ExternalToolError, FFmpegNotFoundError, ProbeError
from nippers.job import Job
from nippers.models import Segment
from nippers.timings import FormatError

USAGE = """\
# Use:
#    -i <multimedia file>
#    -c <timings file>
#    -o <output directory>"""

_WHAT = {
    "media": "Multimedia file",
    "timings": "Config file",
    "output_dir": "Output directory",
}


class UsageError(ValueError):
    """Bad, missing or repeated command-line flags."""
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


class _StoreOnce(argparse.Action):
    """Store a flag's value, refusing to see the same flag twice."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            raise UsageError(f"{_WHAT[self.dest]} cannot be set twice")
        setattr(namespace, self.dest, values)


class _ShowUsage(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        raise UsageError("")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="nippers",
        description="Nippers: cut a media file into named pieces using a timings file.",
        add_help=False,
    )
    parser.add_argument("-i", dest="media", action=_StoreOnce, help="Multimedia file to cut")
    parser.add_argument("-c", dest="timings", action=_StoreOnce, help="Timings file")
    parser.add_argument("-o", dest="output_dir", action=_StoreOnce, help="Existing output directory")
    parser.add_argument("-h", nargs=0, action=_ShowUsage, help="Show usage and exit")
    return parser


def parse_job(argv: list[str] | None = None) -> Job:
    """Parse command-line flags into a Job, raising UsageError on any problem."""
    args = build_parser().parse_args(argv)

    for dest, what in _WHAT.items():
        if not getattr(args, dest):
            raise UsageError(f"No {what.lower()} provided")

    output_dir = Path(args.output_dir)
    if not output_dir.is_dir():
        raise UsageError(f"Output directory does not exist: {output_dir}")

    return Job(
        media=Path(args.media),
        timings=Path(args.timings),
        output_dir=output_dir,
    )


def _print_notice(action: str, segment: Segment) -> None:
    if action == "skip":
        print("Skipping:")
    else:
        print(f'Extracting: "{segment.label}"')
    print(f" - Time info: {segment.start} + {segment.duration} s", flush=True)


def main(argv: list[str] | None = None) -> None:
    try:
        job = parse_job(argv)
    except UsageError as exc:
        if str(exc):
            print(f"! {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    try:
        result = process(job, on_notice=_print_notice)
    except ExternalToolError as exc:
        print(f"! {exc}", file=sys.stderr)
        sys.exit(exc.returncode if exc.returncode > 0 else 1)
    except (FormatError, ProbeError, FFmpegNotFoundError, OSError, UnicodeDecodeError) as exc:
        print(f"! {exc}", file=sys.stderr)
        sys.exit(1)

    print()
    print(f"Done! {len(result.extracted)} segment(s) written to {job.output_dir}")
    if result.skipped:
        print(f"  Skipped: {result.skipped}")
    if result.media_duration is not None:
        print(f"  Source duration: {result.media_duration}s")


if __name__ == "__main__":
    main()
