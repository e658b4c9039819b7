"""Core data models for corpora and their derived results."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# One line (file sources) or one paragraph (web source)
TextUnit = str
Corpus = list[TextUnit]


@dataclass(frozen=True)
class WordStats:
    """Word count and accumulated length, excluding integer tokens."""

    total_words: int = 0
    total_length: int = 0

    @property
    def is_reportable(self) -> bool:
        return self.total_words > 0

    @property
    def average_word_length(self) -> Optional[int]:
        """Truncated average word length, or None when no word was counted."""
        if not self.is_reportable:
            return None
        return self.total_length // self.total_words


@dataclass(frozen=True)
class FileDescriptor:
    """Path, size and modification time of one analysed file."""

    path: str
    size_bytes: int
    modified_at: datetime

    @property
    def modified_rfc3339(self) -> str:
        return self.modified_at.isoformat(timespec="seconds")

    def index_line(self) -> str:
        return f"{self.path} | {self.size_bytes} | {self.modified_rfc3339}"

    def report_line(self) -> str:
        return f"File: {self.path} | Size: {self.size_bytes}"


@dataclass(frozen=True)
class FilterResult:
    """Stable matching/non-matching partition of a corpus."""

    matching: Corpus
    non_matching: Corpus


@dataclass(frozen=True)
class Slice:
    """Head and tail of the same corpus. They overlap when 2n > len(corpus)."""

    head: Corpus
    tail: Corpus


@dataclass
class SourceResult:
    """Corpus produced by a source adapter, plus per-file metadata."""

    units: Corpus
    descriptors: list[FileDescriptor] = field(default_factory=list)  # empty for web
