"""Protocol for corpus source adapters."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from corpusops.models import SourceResult


@runtime_checkable
class CorpusSource(Protocol):
    """Protocol for corpus source adapters.

    Implementations turn a local source (a file, a folder) into an ordered
    corpus. Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'file', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this adapter can read the given source."""
        ...

    def load(self, source: Path) -> SourceResult:
        """Read the source into a corpus with its file descriptors."""
        ...
