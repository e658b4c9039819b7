"""Integration tests for the analysis runs.

Files are real (tmp_path); the Wikipedia client is replaced by a stub
returning a parsed fixture document.
"""

from __future__ import annotations

import re
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup

from corpusops.config import AnalysisConfig
from corpusops.engine import analyse_directory, analyse_file, analyse_wikipedia
from corpusops.errors import InputError, SourceExhaustedError, UpstreamError

INDEX_LINE = re.compile(r"^(?P<path>.+) \| (?P<size>\d+) \| \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$")


def _lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _stub_client(document: BeautifulSoup) -> MagicMock:
    client = MagicMock()
    client.fetch.return_value = document
    return client


# =============================================================================
# SINGLE FILE
# =============================================================================


class TestAnalyseFile:
    """Tests for analyse_file run."""

    def test_keyword_partition_artifacts(
        self, sample_file: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        result = analyse_file(sample_file, "hello", 2, config)

        assert _lines(out_dir / "filtered.txt") == ["hello world", "hello there"]
        assert _lines(out_dir / "filtered_not.txt") == ["42 99"]
        assert all(o.ok for o in result.outcomes)

    def test_head_tail_artifacts(
        self, sample_file: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        analyse_file(sample_file, "", 2, config)
        assert _lines(out_dir / "head.txt") == ["hello world", "42 99"]
        assert _lines(out_dir / "tail.txt") == ["42 99", "hello there"]

    def test_stats_and_metadata(self, sample_file: Path, config: AnalysisConfig) -> None:
        result = analyse_file(sample_file, "hello", 0, config)
        assert result.line_count == 3
        # hello world hello there -> 4 words, 20 characters
        assert result.stats.total_words == 4
        assert result.stats.average_word_length == 5
        assert result.descriptor.size_bytes == sample_file.stat().st_size

    def test_oversized_slice(
        self, sample_file: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        analyse_file(sample_file, "", 50, config)
        assert _lines(out_dir / "head.txt") == _lines(sample_file)
        assert _lines(out_dir / "tail.txt") == _lines(sample_file)

    def test_missing_file_writes_nothing(
        self, tmp_path: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        with pytest.raises(InputError):
            analyse_file(tmp_path / "missing.txt", "x", 1, config)
        assert not out_dir.exists()

    def test_directory_rejected(self, tmp_path: Path, config: AnalysisConfig) -> None:
        with pytest.raises(InputError):
            analyse_file(tmp_path, "x", 1, config)


# =============================================================================
# DIRECTORY
# =============================================================================


class TestAnalyseDirectory:
    """Tests for analyse_directory run."""

    def test_index_report_merged(
        self, corpus_dir: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        result = analyse_directory(corpus_dir, config)

        index = _lines(out_dir / "index.txt")
        assert len(index) == 2
        sizes = []
        for line in index:
            match = INDEX_LINE.match(line)
            assert match is not None, line
            sizes.append(int(match.group("size")))
        assert sizes == [10, 20]

        assert _lines(out_dir / "report.txt") == [
            f"File: {corpus_dir / 'a.txt'} | Size: 10",
            f"File: {corpus_dir / 'nested' / 'b.txt'} | Size: 20",
        ]
        assert len(_lines(out_dir / "merged.txt")) == 2 + 4
        assert result.merged == _lines(out_dir / "merged.txt")

    def test_extension_override(
        self, corpus_dir: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        analyse_directory(corpus_dir, config, extension=".md")
        assert _lines(out_dir / "merged.txt") == ["ignored"]

    def test_no_matching_files(
        self, tmp_path: Path, config: AnalysisConfig, out_dir: Path
    ) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = analyse_directory(empty, config)
        assert result.descriptors == []
        assert (out_dir / "index.txt").read_text(encoding="utf-8") == ""

    def test_missing_root(self, tmp_path: Path, config: AnalysisConfig, out_dir: Path) -> None:
        with pytest.raises(InputError):
            analyse_directory(tmp_path / "missing", config)
        assert not out_dir.exists()


# =============================================================================
# WIKIPEDIA
# =============================================================================


class TestAnalyseWikipedia:
    """Tests for analyse_wikipedia run."""

    def test_summary_written(
        self, wiki_document: BeautifulSoup, config: AnalysisConfig, out_dir: Path
    ) -> None:
        result = analyse_wikipedia(
            "Go_(langage)", "COMPIL", config, client=_stub_client(wiki_document)
        )

        lines = _lines(out_dir / "wiki_Go_(langage).txt")
        assert lines[0] == "Article: Go_(langage)"
        assert lines[1] == "Total paragraphs: 3"
        assert lines[2] == f"Total words: {result.stats.total_words}"
        assert lines[4] == ""
        assert lines[5] == "Paragraphs containing 'COMPIL':"
        assert lines[6:] == [
            "Go est un langage de programmation compilé.",
            "Le compilateur Go est rapide.",
        ]
        assert result.output_path == out_dir / "wiki_Go_(langage).txt"

    def test_integer_tokens_not_counted(
        self, wiki_document: BeautifulSoup, config: AnalysisConfig
    ) -> None:
        result = analyse_wikipedia("Go", "", config, client=_stub_client(wiki_document))
        # 7 + 10 (2007 excluded) + 5 words
        assert result.stats.total_words == 22

    def test_zero_paragraphs_writes_nothing(
        self, config: AnalysisConfig, out_dir: Path
    ) -> None:
        empty = BeautifulSoup("<div id='mw-content-text'><p> </p></div>", "html.parser")
        with pytest.raises(SourceExhaustedError):
            analyse_wikipedia("Empty", "x", config, client=_stub_client(empty))
        assert not out_dir.exists()

    def test_upstream_error_writes_nothing(self, config: AnalysisConfig, out_dir: Path) -> None:
        client = MagicMock()
        client.fetch.side_effect = UpstreamError("HTTP error: 404 Not Found")
        with pytest.raises(UpstreamError):
            analyse_wikipedia("Missing", "x", config, client=client)
        assert not out_dir.exists()

    def test_uses_configured_language(
        self, config: AnalysisConfig, monkeypatch: pytest.MonkeyPatch, wiki_document: BeautifulSoup
    ) -> None:
        created = {}

        class FakeClient:
            def __init__(self, lang: str) -> None:
                created["lang"] = lang

            def fetch(self, article: str) -> BeautifulSoup:
                return wiki_document

        monkeypatch.setattr("corpusops.engine.WikipediaClient", FakeClient)
        analyse_wikipedia("Go", "", config.model_copy(update={"wiki_lang": "en"}))
        assert created["lang"] == "en"
