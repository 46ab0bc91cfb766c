"""Segment planner: folds timings lines into labeled segments."""

from typing import Callable, Iterable, Iterator

from nippers.models import ParsedLine, Segment


def plan_segments(
    lines: Iterable[ParsedLine],
    media_length: Callable[[], int],
) -> Iterator[Segment]:
    """Pair each label with the span up to the next boundary.

    A line opens a segment that the following line closes, so the first
    line only seeds the cursor. Once *lines* is exhausted, *media_length*
    is called (exactly once) and the last open label is closed with it.
    Lines with an empty label open nothing.

    Segments are yielded as soon as they are closed, so callers can act on
    one before the next line is read.
    """
    previous_start = 0
    previous_label = ""

    for line in lines:
        if previous_label:
            yield Segment(label=previous_label, start=previous_start, end=line.timestamp)
        previous_start = line.timestamp
        previous_label = line.label

    end = media_length()
    if previous_label:
        yield Segment(label=previous_label, start=previous_start, end=end)
