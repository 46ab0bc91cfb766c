"""Timings file parsing: line splitting, timestamp conversion, label sanitizing.

A timings file lists one boundary per line::

    00:00 Entering the void
    03:15 Warm abyss
    06:11 ---
    1:02:21 The end

The first whitespace run separates the timestamp from the label. Empty lines
are ignored; there is no comment syntax.
"""

import re
from pathlib import Path
from typing import Iterable, Iterator

from nippers.models import ParsedLine

_UNSAFE_CHARS = re.compile(r"[/\\:*?\"']")
_DIGITS = re.compile(r"[0-9]+")


class FormatError(ValueError):
    """Raised when a timestamp is not MM:SS or HH:MM:SS."""

    def __init__(self, token: str, lineno: int | None = None):
        super().__init__(token)
        self.token = token
        self.lineno = lineno

    def __str__(self) -> str:
        where = f" on line {self.lineno}" if self.lineno is not None else ""
        return (
            f'Incorrect time format{where}: "{self.token}", '
            "expected MM:SS or HH:MM:SS"
        )


def sanitize_label(label: str) -> str:
    """Replace characters that are unsafe in file names with ``_``."""
    return _UNSAFE_CHARS.sub("_", label)


def parse_timestamp(token: str) -> int:
    """Convert ``MM:SS`` or ``HH:MM:SS`` into whole seconds.

    Fields are read as base-10 regardless of leading zeros and are not
    range-checked, so ``"1:75"`` is 135 seconds.
    """
    fields = token.split(":")
    if len(fields) not in (2, 3) or not all(_DIGITS.fullmatch(f) for f in fields):
        raise FormatError(token)

    seconds = 0
    for field in fields:
        seconds = seconds * 60 + int(field, 10)
    return seconds


def split_line(line: str) -> tuple[str, str]:
    """Split a timings line into ``(time_token, label)``.

    The first whitespace-separated word is the time token. The remaining
    words form the label, joined by single spaces, so runs of spaces or tabs
    collapse and trailing whitespace is dropped. The label is sanitized; the
    time token is returned as-is.
    """
    words = line.split()
    time_token = words[0] if words else ""
    label = " ".join(words[1:])
    return time_token, sanitize_label(label)


def iter_timings(lines: Iterable[str]) -> Iterator[ParsedLine]:
    """Yield a ParsedLine for every non-empty line, in order.

    Lines are consumed lazily. A bad timestamp raises FormatError tagged
    with its 1-based line number.
    """
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\n").rstrip("\r")
        if not line:
            continue

        time_token, label = split_line(line)
        try:
            seconds = parse_timestamp(time_token)
        except FormatError as exc:
            exc.lineno = lineno
            raise
        yield ParsedLine(timestamp=seconds, label=label)


def load_timings(path: str | Path) -> list[ParsedLine]:
    """Read and parse a whole timings file."""
    with Path(path).open(encoding="utf-8") as fh:
        return list(iter_timings(fh))
