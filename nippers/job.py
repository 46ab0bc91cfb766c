"""Job configuration: the contract between the CLI and the engine."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Job:
    """Everything a single cutting run needs, built once from the command line."""

    media: Path
    timings: Path
    output_dir: Path

    @property
    def extension(self) -> str:
        """Text from the last dot of the media name on (``".avi"``), or ``""``.

        Unlike ``Path.suffix``, a dot-file such as ``.hidden`` keeps its name
        as the extension.
        """
        _, dot, ext = self.media.name.rpartition(".")
        return f".{ext}" if dot else ""

    def output_path(self, label: str) -> Path:
        return self.output_dir / f"{label}{self.extension}"
