"""Flat-file persistence of analysis artifacts."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional

from corpusops.errors import ArtifactWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtifactOutcome:
    """Result of writing one artifact."""

    name: str
    path: Path
    error: Optional[ArtifactWriteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def write_lines(path: Path | str, lines: Iterable[str]) -> None:
    """Create or truncate a file and write one line per item.

    Each line ends with a single "\\n". The file is flushed and closed
    before returning.

    Raises:
        ArtifactWriteError: If the file cannot be created or written
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")
            f.flush()
    except OSError as e:
        raise ArtifactWriteError(path, e.strerror or str(e)) from e


class ReportWriter:
    """Writes named artifacts into an output folder."""

    def __init__(self, out_dir: Path | str):
        self.out_dir = Path(out_dir)

    def path_for(self, name: str) -> Path:
        return self.out_dir / name

    def write_all(self, artifacts: Mapping[str, Iterable[str]]) -> list[ArtifactOutcome]:
        """Write every artifact independently.

        A failure on one artifact is logged and recorded, and the remaining
        artifacts are still attempted.

        Args:
            artifacts: Mapping of file name to lines, written in mapping order

        Returns:
            One ArtifactOutcome per artifact
        """
        try:
            self.out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Each write below will report its own failure
            logger.error(f"Cannot create output folder {self.out_dir}: {e}")

        outcomes = []
        for name, lines in artifacts.items():
            path = self.path_for(name)
            try:
                write_lines(path, lines)
            except ArtifactWriteError as e:
                logger.error(str(e))
                outcomes.append(ArtifactOutcome(name=name, path=path, error=e))
                continue
            logger.debug(f"Wrote {path}")
            outcomes.append(ArtifactOutcome(name=name, path=path))
        return outcomes
