"""Corpus analysis runs over a file, a folder or a Wikipedia article.

Each run loads one corpus through a source adapter, computes its word
statistics, derives subsets (keyword partition, head/tail slices) and
writes every derived artifact to the configured output folder. Runs share
no state; the front-ends (CLI, menu, deck) only call these functions.

Input errors are raised before anything is written. Write failures are
reported per artifact in the returned outcomes.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from corpusops.analysis import compute_stats, filter_by_keyword, head_tail
from corpusops.config import DEFAULT_CONFIG, AnalysisConfig
from corpusops.errors import SourceExhaustedError
from corpusops.models import FileDescriptor, FilterResult, Slice, WordStats
from corpusops.reports import (
    FILTERED,
    FILTERED_NOT,
    HEAD,
    INDEX,
    MERGED,
    REPORT,
    TAIL,
    ArtifactOutcome,
    ReportWriter,
    render_index,
    render_report,
    render_wiki_summary,
    wiki_artifact_name,
)
from corpusops.sources import (
    DirectoryWalkSource,
    SingleFileSource,
    WebParagraphSource,
    WikipediaClient,
)

logger = logging.getLogger(__name__)


@dataclass
class FileAnalysis:
    """Result of analysing a single file."""

    descriptor: FileDescriptor
    line_count: int
    stats: WordStats
    partition: FilterResult
    slice: Slice
    outcomes: list[ArtifactOutcome] = field(default_factory=list)


@dataclass
class DirectoryAnalysis:
    """Result of analysing a folder."""

    root: Path
    descriptors: list[FileDescriptor]
    merged: list[str]
    stats: WordStats
    outcomes: list[ArtifactOutcome] = field(default_factory=list)


@dataclass
class WikiAnalysis:
    """Result of analysing a Wikipedia article."""

    article: str
    paragraphs: list[str]
    stats: WordStats
    partition: FilterResult
    outcomes: list[ArtifactOutcome] = field(default_factory=list)

    @property
    def output_path(self) -> Optional[Path]:
        return self.outcomes[0].path if self.outcomes else None


def analyse_file(
    path: Path | str,
    keyword: str,
    head_tail_length: int,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> FileAnalysis:
    """Analyse one file and write its filtered and sliced artifacts.

    Args:
        path: File to read
        keyword: Case-sensitive substring used to partition lines
        head_tail_length: Number of lines for head.txt and tail.txt
        config: Output folder and defaults

    Returns:
        FileAnalysis with one outcome per artifact

    Raises:
        InputError: If the path is missing or is a directory
    """
    result = SingleFileSource().load(Path(path))
    lines = result.units

    stats = compute_stats(lines)
    partition = filter_by_keyword(lines, keyword, case_sensitive=True)
    lines_slice = head_tail(lines, head_tail_length)

    outcomes = ReportWriter(config.out_dir).write_all(
        {
            FILTERED: partition.matching,
            FILTERED_NOT: partition.non_matching,
            HEAD: lines_slice.head,
            TAIL: lines_slice.tail,
        }
    )

    return FileAnalysis(
        descriptor=result.descriptors[0],
        line_count=len(lines),
        stats=stats,
        partition=partition,
        slice=lines_slice,
        outcomes=outcomes,
    )


def analyse_directory(
    root: Path | str,
    config: AnalysisConfig = DEFAULT_CONFIG,
    extension: Optional[str] = None,
) -> DirectoryAnalysis:
    """Walk a folder and write its report, index and merged corpus.

    Args:
        root: Folder to walk
        config: Output folder and default extension
        extension: File name suffix to match (default: config.default_ext)

    Returns:
        DirectoryAnalysis with one outcome per artifact

    Raises:
        InputError: If root is not a directory
    """
    root = Path(root)
    source = DirectoryWalkSource(extension if extension is not None else config.default_ext)
    result = source.load(root)

    if not result.descriptors:
        logger.warning(f"No '{source.extension}' files found under {root}")

    outcomes = ReportWriter(config.out_dir).write_all(
        {
            REPORT: render_report(result.descriptors),
            INDEX: render_index(result.descriptors),
            MERGED: result.units,
        }
    )

    return DirectoryAnalysis(
        root=root,
        descriptors=result.descriptors,
        merged=result.units,
        stats=compute_stats(result.units),
        outcomes=outcomes,
    )


def analyse_wikipedia(
    article: str,
    keyword: str,
    config: AnalysisConfig = DEFAULT_CONFIG,
    client: Optional[WikipediaClient] = None,
) -> WikiAnalysis:
    """Fetch an article and write its summary with matching paragraphs.

    Args:
        article: Article name as it appears in the URL
        keyword: Case-insensitive substring used to select paragraphs
        config: Output folder and wiki language
        client: Fetcher to use (default: WikipediaClient for config.wiki_lang)

    Returns:
        WikiAnalysis with the summary outcome

    Raises:
        InputError: If the article name is empty
        UpstreamError: If the article cannot be fetched or parsed
        SourceExhaustedError: If the article has no paragraphs
    """
    article = article.strip()
    client = client or WikipediaClient(lang=config.wiki_lang)

    document = client.fetch(article)
    paragraphs = WebParagraphSource().load(document).units
    if not paragraphs:
        raise SourceExhaustedError(f"No paragraph found in '{article}'")

    stats = compute_stats(paragraphs)
    partition = filter_by_keyword(paragraphs, keyword, case_sensitive=False)

    summary = render_wiki_summary(
        article, len(paragraphs), stats, keyword, partition.matching
    )
    outcomes = ReportWriter(config.out_dir).write_all({wiki_artifact_name(article): summary})

    return WikiAnalysis(
        article=article,
        paragraphs=paragraphs,
        stats=stats,
        partition=partition,
        outcomes=outcomes,
    )
