"""Shared data types used across Nippers."""

from dataclasses import dataclass

SKIP_LABEL = "---"


@dataclass(frozen=True)
class ParsedLine:
    """One timings entry: offset in whole seconds and its sanitized label."""

    timestamp: int
    label: str


@dataclass(frozen=True)
class Segment:
    """A labeled [start, end) slice of the source media, in seconds."""

    label: str
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def skipped(self) -> bool:
        return self.label == SKIP_LABEL
