"""Text renderings of analysis results."""

from typing import Iterable

from corpusops.models import FileDescriptor, WordStats

NOT_AVAILABLE = "n/a"


def render_index(descriptors: Iterable[FileDescriptor]) -> list[str]:
    return [d.index_line() for d in descriptors]


def render_report(descriptors: Iterable[FileDescriptor]) -> list[str]:
    return [d.report_line() for d in descriptors]


def render_wiki_summary(
    article: str,
    paragraph_count: int,
    stats: WordStats,
    keyword: str,
    filtered: Iterable[str],
) -> list[str]:
    """Summary header block followed by the paragraphs matching the keyword."""
    average = stats.average_word_length
    lines = [
        f"Article: {article}",
        f"Total paragraphs: {paragraph_count}",
        f"Total words: {stats.total_words}",
        f"Average word length: {NOT_AVAILABLE if average is None else average}",
        "",
        f"Paragraphs containing '{keyword}':",
    ]
    lines.extend(filtered)
    return lines
