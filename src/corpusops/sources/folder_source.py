"""Source adapter walking a local folder recursively."""

import logging
import os
from pathlib import Path

from corpusops.errors import InputError
from corpusops.models import FileDescriptor, SourceResult
from corpusops.sources.file_source import describe_file, read_lines

logger = logging.getLogger(__name__)


class DirectoryWalkSource:
    """Adapter merging every file with a given extension under a folder."""

    source_type = "folder"

    def __init__(self, extension: str = ".txt"):
        self.extension = extension

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def load(self, source: Path) -> SourceResult:
        """Walk a folder and merge the lines of every matching file.

        Directory and file names are visited in sorted order so that the
        merged corpus is reproducible.

        Args:
            source: Path to the root folder

        Returns:
            SourceResult with the merged lines and one descriptor per file

        Raises:
            InputError: If the root is missing or not a directory
        """
        if not source.is_dir():
            raise InputError(f"Not a directory: {source}")

        merged: list[str] = []
        descriptors: list[FileDescriptor] = []

        for root, dirnames, filenames in os.walk(source, onerror=self._on_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if not filename.endswith(self.extension):
                    continue

                full_path = Path(root) / filename
                if not full_path.is_file():
                    continue

                try:
                    descriptor = describe_file(full_path)
                    lines = read_lines(full_path)
                except (PermissionError, OSError) as e:
                    logger.warning(f"Skipping {full_path}: {e}")
                    continue

                descriptors.append(descriptor)
                merged.extend(lines)

        logger.debug(f"Matched {len(descriptors)} files under {source}")
        return SourceResult(units=merged, descriptors=descriptors)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping {error.filename}: {error.strerror or error}")
