"""Corpus source adapters."""

from pathlib import Path
from typing import Optional

from corpusops.protocols import CorpusSource
from corpusops.sources.file_source import SingleFileSource, describe_file, read_lines
from corpusops.sources.folder_source import DirectoryWalkSource
from corpusops.sources.web_source import (
    WebParagraphSource,
    WikipediaClient,
    extract_paragraphs,
)


def get_source(source: Path | str, extension: str = ".txt") -> Optional[CorpusSource]:
    """Find a local adapter that can read the given source.

    Args:
        source: Path to a file or folder
        extension: File name suffix used when the source is a folder

    Returns:
        A CorpusSource instance that can handle the source, or None
    """
    source_path = Path(source)
    candidates: list[CorpusSource] = [
        SingleFileSource(),
        DirectoryWalkSource(extension),
    ]
    for candidate in candidates:
        if candidate.can_handle(source_path):
            return candidate
    return None


__all__ = [
    "get_source",
    "SingleFileSource",
    "DirectoryWalkSource",
    "WebParagraphSource",
    "WikipediaClient",
    "extract_paragraphs",
    "describe_file",
    "read_lines",
]
