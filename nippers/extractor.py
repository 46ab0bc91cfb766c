"""Segment extractor: writes one output file per labeled segment."""

from pathlib import Path
from typing import Callable

from nippers import ffutil
from nippers.job import Job
from nippers.models import Segment


def extract_segment(
    segment: Segment,
    job: Job,
    on_notice: Callable[[str, Segment], None] | None = None,
) -> Path | None:
    """Cut *segment* out of the job's media, or skip it.

    Segments labeled ``---`` are reported with a "skip" notice and not
    written. Unlabeled segments are ignored without a notice.
    Returns the written file, or None when nothing was written.
    """
    if not segment.label:
        return None

    if segment.skipped:
        if on_notice:
            on_notice("skip", segment)
        return None

    if on_notice:
        on_notice("extract", segment)
    return ffutil.cut_segment(
        job.media,
        segment.start,
        segment.duration,
        job.output_path(segment.label),
    )
