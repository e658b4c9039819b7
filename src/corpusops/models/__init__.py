"""Data models for corpusops."""

from corpusops.models.corpus import (
    Corpus,
    FileDescriptor,
    FilterResult,
    Slice,
    SourceResult,
    TextUnit,
    WordStats,
)

__all__ = [
    "Corpus",
    "TextUnit",
    "WordStats",
    "FileDescriptor",
    "FilterResult",
    "Slice",
    "SourceResult",
]
