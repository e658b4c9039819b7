"""Exception hierarchy shared by the engine and its front-ends."""

from pathlib import Path


class CorpusOpsError(Exception):
    """Base class for every error reported to the user."""


class InputError(CorpusOpsError):
    """Invalid path, missing file, directory given as a file, bad user input."""


class SourceExhaustedError(CorpusOpsError):
    """A source produced nothing to analyse."""


class UpstreamError(CorpusOpsError):
    """The remote document could not be fetched or parsed."""


class ProcessOpError(CorpusOpsError):
    """A process listing or kill command failed."""


class ArtifactWriteError(CorpusOpsError):
    """One artifact could not be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write {self.path}: {reason}")
