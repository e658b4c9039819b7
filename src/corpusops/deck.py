"""Corpus Deck - a TUI for inspecting files and folders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
)

from corpusops import engine
from corpusops.analysis import parse_slice_length
from corpusops.config import DEFAULT_CONFIG, AnalysisConfig
from corpusops.errors import CorpusOpsError
from corpusops.models import FileDescriptor
from corpusops.reports import ArtifactOutcome
from corpusops.sources import get_source


@dataclass
class DeckStats:
    """Figures shown in the stats panel after a run."""

    source_type: str = ""
    files: int = 0
    lines: int = 0
    words: int = 0
    average_word_length: int | None = None
    matching: int | None = None
    total_bytes: int = 0
    status: str = "idle"

    @classmethod
    def from_file(cls, result: engine.FileAnalysis) -> "DeckStats":
        return cls(
            source_type="file",
            files=1,
            lines=result.line_count,
            words=result.stats.total_words,
            average_word_length=result.stats.average_word_length,
            matching=len(result.partition.matching),
            total_bytes=result.descriptor.size_bytes,
            status="complete",
        )

    @classmethod
    def from_directory(cls, result: engine.DirectoryAnalysis) -> "DeckStats":
        return cls(
            source_type="folder",
            files=len(result.descriptors),
            lines=len(result.merged),
            words=result.stats.total_words,
            average_word_length=result.stats.average_word_length,
            total_bytes=sum(d.size_bytes for d in result.descriptors),
            status="complete",
        )


def format_size(size: int) -> str:
    return f"{size / 1024:.1f}KB" if size >= 1024 else f"{size}B"


class StatsPanel(Static):
    """Statistics of the last run."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(DeckStats())

    def update_display(self, stats: DeckStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")
        average = "--" if stats.average_word_length is None else stats.average_word_length
        matching = "--" if stats.matching is None else f"{stats.matching:,}"

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]SOURCE[/b]  {stats.source_type or "--"}

[b]CORPUS[/b]
  Files       [cyan]{stats.files:,}[/]
  Lines       [green]{stats.lines:,}[/]
  Matching    [blue]{matching}[/]

[b]WORDS[/b]
  Count       [magenta]{stats.words:,}[/]
  Avg length  [yellow]{average}[/]

[b]SIZE[/b]
  Total       [cyan]{format_size(stats.total_bytes)}[/]""")


class FileTable(DataTable):
    """Files read by the last run."""

    def on_mount(self) -> None:
        self.add_columns("File", "Size", "Modified")
        self.cursor_type = "row"

    def add_file(self, descriptor: FileDescriptor) -> None:
        display_name = descriptor.path
        if len(display_name) > 40:
            display_name = "..." + display_name[-37:]
        self.add_row(
            display_name,
            format_size(descriptor.size_bytes),
            descriptor.modified_rfc3339,
        )


class CorpusDeck(App):
    """The Corpus Deck - interactive corpus inspection."""

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 38;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    FileTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #log-panel {
        height: 12;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
    }
    """

    BINDINGS = [
        Binding("a", "analyse", "Analyse (auto)", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "Corpus Deck"
    SUB_TITLE = "Corpus Inspection Console"

    def __init__(self, config: AnalysisConfig = DEFAULT_CONFIG) -> None:
        super().__init__()
        self.config = config

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("CORPUS", classes="section-title")
                yield StatsPanel()
                yield Rule()
                yield Label("Source Path")
                yield Input(value=self.config.default_file, id="source-input")
                yield Label("Keyword")
                yield Input(placeholder="Empty matches every line", id="keyword-input")
                yield Label("Head/tail lines")
                yield Input(value="10", id="lines-input")
                with Horizontal(id="action-buttons"):
                    yield Button("Analyse file", id="file-btn", variant="success")
                    yield Button("Analyse folder", id="folder-btn", variant="primary")
                    yield Button("Clear", id="clear-btn", variant="warning")

            with Vertical(id="center-panel"):
                yield Label("FILES", classes="section-title")
                yield FileTable(id="file-table")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Corpus Deck initialized")
        self._log(f"Artifacts are written to {self.config.out_dir}")

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "file-btn":
            self.run_analysis("file")
        elif event.button.id == "folder-btn":
            self.run_analysis("folder")
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_clear(self) -> None:
        self.query_one(StatsPanel).update_display(DeckStats())
        self.query_one("#file-table", FileTable).clear()
        self.query_one("#log-panel", Log).clear()
        self._log("Cleared - ready for new run")

    def action_analyse(self) -> None:
        """Analyse the source input as a file or a folder, whichever it is."""
        source = self.query_one("#source-input", Input).value.strip()
        if not source:
            self._log("ERROR: No source path specified")
            return

        adapter = get_source(source, self.config.default_ext)
        if adapter is None:
            self._log(f"ERROR: Path not found: {source}")
            self.query_one(StatsPanel).update_display(DeckStats(status="error"))
            return
        self.run_analysis(adapter.source_type)

    def run_analysis(self, source_type: str) -> None:
        """Analyse the source input as a single file or as a folder."""
        source = self.query_one("#source-input", Input).value.strip()
        keyword = self.query_one("#keyword-input", Input).value.strip()
        length = parse_slice_length(self.query_one("#lines-input", Input).value)

        if not source:
            self._log("ERROR: No source path specified")
            return

        self._log(f"Analysing {source_type}: {source}")
        try:
            if source_type == "folder":
                directory = engine.analyse_directory(source, self.config)
                stats = DeckStats.from_directory(directory)
                descriptors = directory.descriptors
                outcomes = directory.outcomes
            else:
                single = engine.analyse_file(source, keyword, length, self.config)
                stats = DeckStats.from_file(single)
                descriptors = [single.descriptor]
                outcomes = single.outcomes
        except CorpusOpsError as e:
            self._log(f"ERROR: {e}")
            self.query_one(StatsPanel).update_display(DeckStats(status="error"))
            return

        table = self.query_one("#file-table", FileTable)
        table.clear()
        for descriptor in descriptors:
            table.add_file(descriptor)
        self.query_one(StatsPanel).update_display(stats)
        self._log_outcomes(outcomes)

    def _log_outcomes(self, outcomes: list[ArtifactOutcome]) -> None:
        for outcome in outcomes:
            if outcome.ok:
                self._log(f"Wrote {outcome.path}")
            else:
                self._log(f"ERROR: {outcome.error}")


def main(config: AnalysisConfig = DEFAULT_CONFIG) -> None:
    """Run the Corpus Deck TUI."""
    app = CorpusDeck(config)
    app.run()


if __name__ == "__main__":
    main()
