"""FFmpeg/ffprobe subprocess helpers."""

import json
import shutil
import subprocess
from pathlib import Path

FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"


class FFmpegNotFoundError(RuntimeError):
    pass


class ProbeError(ValueError):
    """Raised when ffprobe does not report a usable duration."""
    pass


class ExternalToolError(RuntimeError):
    """Raised when ffmpeg or ffprobe exits with a non-zero status."""

    def __init__(self, tool: str, returncode: int):
        super().__init__(f"{tool} failed (rc={returncode})")
        self.tool = tool
        self.returncode = returncode


def check_ffmpeg() -> None:
    """Raise FFmpegNotFoundError if ffmpeg/ffprobe are not on PATH."""
    for cmd in (FFMPEG, FFPROBE):
        if shutil.which(cmd) is None:
            raise FFmpegNotFoundError(f"{cmd} not found on PATH")


def _run(cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(cmd, check=True, **kwargs)
    except subprocess.CalledProcessError as exc:
        raise ExternalToolError(cmd[0], exc.returncode) from exc


def parse_duration(raw: str) -> int:
    """Turn an ffprobe duration string into whole seconds, dropping the fraction.

    ``"205.999"`` is 205, not 206.
    """
    whole = raw.strip().split(".", 1)[0]
    if not whole.isdigit():
        raise ProbeError(f"Unusable duration from ffprobe: {raw!r}")
    return int(whole)


def probe_duration(input_path: Path) -> int:
    """Return the total duration of *input_path* in whole seconds."""
    cmd = [
        FFPROBE,
        "-v", "quiet",
        "-print_format", "json",
        "-show_format",
        str(input_path),
    ]
    result = _run(cmd, capture_output=True, text=True)
    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as exc:
        raise ProbeError(f"Unreadable ffprobe output for {input_path}") from exc

    raw = data.get("format", {}).get("duration")
    if raw is None:
        raise ProbeError(f"No duration reported for {input_path}")
    return parse_duration(str(raw))


def cut_segment(
    input_path: Path, start: int, duration: int, output_path: Path
) -> Path:
    """Copy ``duration`` seconds starting at ``start`` into *output_path*.

    Streams are copied, not re-encoded. An existing output file is
    overwritten and stdin is left alone.
    """
    cmd = [
        FFMPEG,
        "-nostdin",
        "-y",
        "-v", "error",
        "-ss", str(start),
        "-t", str(duration),
        "-i", str(input_path),
        "-c:a", "copy",
        "-c:v", "copy",
        str(output_path),
    ]
    _run(cmd)
    return output_path
