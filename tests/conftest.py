"""Shared pytest fixtures for corpusops tests."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from corpusops.config import AnalysisConfig

WIKI_HTML = """
<html>
  <body>
    <div id="mw-navigation"><p>Navigation paragraph</p></div>
    <div id="mw-content-text">
      <p>  Go est un langage de programmation compilé.  </p>
      <p>   </p>
      <p>Il a été conçu chez <a href="/wiki/Google">Google</a> en 2007 par trois ingénieurs.</p>
      <table><tr><td><p>Le compilateur Go est rapide.</p></td></tr></table>
    </div>
  </body>
</html>
"""


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return the artifact folder used by tests (not yet created)."""
    return tmp_path / "out"


@pytest.fixture
def config(tmp_path: Path, out_dir: Path) -> AnalysisConfig:
    """Configuration writing artifacts under tmp_path."""
    return AnalysisConfig(
        default_file=str(tmp_path / "data" / "input.txt"),
        base_dir=str(tmp_path / "data"),
        out_dir=str(out_dir),
    )


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Three-line file with one line of integers only."""
    path = tmp_path / "sample.txt"
    path.write_text("hello world\n42 99\nhello there\n", encoding="utf-8")
    return path


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Folder with two .txt files (10 and 20 bytes) and noise."""
    root = tmp_path / "corpus"
    (root / "nested").mkdir(parents=True)
    (root / "a.txt").write_text("aaaa\nbbbb\n", encoding="utf-8")  # 10 bytes
    (root / "nested" / "b.txt").write_text("cccc\ndddd\neeee\nffff\n", encoding="utf-8")  # 20 bytes
    (root / "notes.md").write_text("ignored\n", encoding="utf-8")
    return root


@pytest.fixture
def wiki_document() -> BeautifulSoup:
    """Parsed article with three non-empty body paragraphs."""
    return BeautifulSoup(WIKI_HTML, "html.parser")


@pytest.fixture
def wiki_html() -> str:
    return WIKI_HTML
