"""Report rendering and writing."""

from corpusops.reports.render import render_index, render_report, render_wiki_summary
from corpusops.reports.writer import ArtifactOutcome, ReportWriter, write_lines

# Artifact file names
FILTERED = "filtered.txt"
FILTERED_NOT = "filtered_not.txt"
HEAD = "head.txt"
TAIL = "tail.txt"
REPORT = "report.txt"
INDEX = "index.txt"
MERGED = "merged.txt"


def wiki_artifact_name(article: str) -> str:
    """File name of a Wikipedia summary; path separators become underscores."""
    safe = article.replace("/", "_").replace("\\", "_")
    return f"wiki_{safe}.txt"


__all__ = [
    "ArtifactOutcome",
    "ReportWriter",
    "write_lines",
    "render_index",
    "render_report",
    "render_wiki_summary",
    "wiki_artifact_name",
    "FILTERED",
    "FILTERED_NOT",
    "HEAD",
    "TAIL",
    "REPORT",
    "INDEX",
    "MERGED",
]
