"""Source adapter for a single text file."""

from datetime import datetime
from pathlib import Path

from corpusops.errors import InputError
from corpusops.models import FileDescriptor, SourceResult


def read_lines(path: Path) -> list[str]:
    """Read a text file as a list of lines without their terminators.

    Lines end at "\\n" only; one "\\r" before it is dropped and a bare "\\r"
    stays inside the line. Undecodable bytes are replaced rather than
    failing the read.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
        return [line.removesuffix("\n").removesuffix("\r") for line in f]


def describe_file(path: Path) -> FileDescriptor:
    """Build a FileDescriptor from the file's stat information."""
    info = path.stat()
    return FileDescriptor(
        path=str(path),
        size_bytes=info.st_size,
        modified_at=datetime.fromtimestamp(info.st_mtime).astimezone(),
    )


class SingleFileSource:
    """Adapter reading one file line by line."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing regular file."""
        return source.is_file()

    def load(self, source: Path) -> SourceResult:
        """Read the file's lines.

        Args:
            source: Path to the file

        Returns:
            SourceResult with the lines and a single descriptor

        Raises:
            InputError: If the path is missing, a directory, or unreadable
        """
        if not source.exists():
            raise InputError(f"File not found: {source}")
        if source.is_dir():
            raise InputError(f"Not a file: {source}")

        try:
            descriptor = describe_file(source)
            lines = read_lines(source)
        except OSError as e:
            raise InputError(f"Cannot read {source}: {e.strerror or e}") from e

        return SourceResult(units=lines, descriptors=[descriptor])
