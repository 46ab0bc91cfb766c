"""Orchestrator: runs the cutting pipeline defined by a Job."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from nippers import ffutil
from nippers.extractor import extract_segment
from nippers.job import Job
from nippers.models import Segment
from nippers.planner import plan_segments
from nippers.timings import iter_timings


@dataclass
class EngineResult:
    extracted: list[Path] = field(default_factory=list)
    skipped: int = 0
    media_duration: int | None = None


def process(
    job: Job,
    on_notice: Callable[[str, Segment], None] | None = None,
) -> EngineResult:
    """Execute the full cutting pipeline.

    Args:
        job: Paths for the media, timings file and output directory.
        on_notice: Optional callback(action, segment), action being
            "extract" or "skip".

    Timings are streamed: each segment is written before the next line is
    parsed, so an error partway through leaves earlier files in place.
    """
    result = EngineResult()

    def _media_length() -> int:
        result.media_duration = ffutil.probe_duration(job.media)
        return result.media_duration

    ffutil.check_ffmpeg()

    with job.timings.open(encoding="utf-8") as fh:
        for segment in plan_segments(iter_timings(fh), _media_length):
            written = extract_segment(segment, job, on_notice=on_notice)
            if written is not None:
                result.extracted.append(written)
            elif segment.skipped:
                result.skipped += 1

    return result
