"""Protocol definitions for extensible components."""

from corpusops.protocols.source import CorpusSource

__all__ = ["CorpusSource"]
