"""Interactive menu driven by an explicit finite-state machine."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from corpusops import engine
from corpusops.analysis import parse_slice_length
from corpusops.config import AnalysisConfig
from corpusops.errors import CorpusOpsError
from corpusops.ops import (
    kill_process,
    list_processes,
    lock_file,
    parse_pid,
    search_processes,
    unlock_file,
)


class MenuState(str, Enum):
    MAIN = "MAIN"
    PROCESS = "PROCESS"
    SECURITY = "SECURITY"
    EXIT = "EXIT"


class Action(str, Enum):
    ANALYSE_FILE = "ANALYSE_FILE"
    ANALYSE_DIRECTORY = "ANALYSE_DIRECTORY"
    ANALYSE_WIKIPEDIA = "ANALYSE_WIKIPEDIA"
    LIST_PROCESSES = "LIST_PROCESSES"
    SEARCH_PROCESSES = "SEARCH_PROCESSES"
    KILL_PROCESS = "KILL_PROCESS"
    LOCK_FILE = "LOCK_FILE"
    UNLOCK_FILE = "UNLOCK_FILE"


Transition = tuple[MenuState, Optional[Action]]

_TRANSITIONS: dict[MenuState, dict[str, Transition]] = {
    MenuState.MAIN: {
        "A": (MenuState.MAIN, Action.ANALYSE_FILE),
        "B": (MenuState.MAIN, Action.ANALYSE_DIRECTORY),
        "C": (MenuState.MAIN, Action.ANALYSE_WIKIPEDIA),
        "D": (MenuState.PROCESS, None),
        "E": (MenuState.SECURITY, None),
        "Q": (MenuState.EXIT, None),
    },
    MenuState.PROCESS: {
        "1": (MenuState.PROCESS, Action.LIST_PROCESSES),
        "2": (MenuState.PROCESS, Action.SEARCH_PROCESSES),
        "3": (MenuState.PROCESS, Action.KILL_PROCESS),
        "Q": (MenuState.MAIN, None),
    },
    MenuState.SECURITY: {
        "1": (MenuState.SECURITY, Action.LOCK_FILE),
        "2": (MenuState.SECURITY, Action.UNLOCK_FILE),
        "Q": (MenuState.MAIN, None),
    },
}

MENU_TEXT: dict[MenuState, str] = {
    MenuState.MAIN: """
===== MENU =====
A - Analyse file
B - Analyse folder
C - Analyse Wikipedia article
D - Processes
E - Locks
Q - Quit""",
    MenuState.PROCESS: """
===== Processes =====
1 - List processes
2 - Search processes
3 - Kill process
Q - Back""",
    MenuState.SECURITY: """
===== Locks =====
1 - Lock file
2 - Unlock file
Q - Back""",
}


def normalize_choice(choice: str) -> str:
    return choice.strip().upper()


def is_valid_choice(state: MenuState, choice: str) -> bool:
    return normalize_choice(choice) in _TRANSITIONS.get(state, {})


def transition(state: MenuState, choice: str) -> Transition:
    """Compute the next state and the action to run for a menu choice.

    Unknown choices keep the current state and run nothing.
    """
    return _TRANSITIONS.get(state, {}).get(normalize_choice(choice), (state, None))


class MenuSession:
    """Prompt loop over the menu state machine.

    Input and output are injectable so that the loop can be driven by tests.
    """

    def __init__(
        self,
        config: AnalysisConfig,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.state = MenuState.MAIN
        self._input = input_fn
        self._output = output
        self._handlers: dict[Action, Callable[[], None]] = {
            Action.ANALYSE_FILE: self.analyse_file,
            Action.ANALYSE_DIRECTORY: self.analyse_directory,
            Action.ANALYSE_WIKIPEDIA: self.analyse_wikipedia,
            Action.LIST_PROCESSES: self.list_processes,
            Action.SEARCH_PROCESSES: self.search_processes,
            Action.KILL_PROCESS: self.kill_process,
            Action.LOCK_FILE: self.lock_file,
            Action.UNLOCK_FILE: self.unlock_file,
        }

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def say(self, message: str = "") -> None:
        self._output(message)

    def run(self) -> None:
        """Loop until the user quits. Action errors are reported, never fatal."""
        while self.state is not MenuState.EXIT:
            self.say(MENU_TEXT[self.state])
            try:
                choice = self.ask("Choice: ")
            except EOFError:
                break

            if not is_valid_choice(self.state, choice):
                self.say("Invalid choice")
                continue

            self.state, action = transition(self.state, choice)
            if action is None:
                continue
            try:
                self._handlers[action]()
            except CorpusOpsError as e:
                self.say(f"Error: {e}")
            except EOFError:
                # Input closed in the middle of an action
                break
        self.say("Bye.")

    # Analysis actions

    def _report_outcomes(self, outcomes: list) -> None:
        for outcome in outcomes:
            if not outcome.ok:
                self.say(f"Error: {outcome.error}")

    def analyse_file(self) -> None:
        path = self.ask("File path (empty = default): ") or self.config.default_file
        keyword = self.ask("Keyword: ")
        length = parse_slice_length(self.ask("Head/tail line count: "))

        result = engine.analyse_file(path, keyword, length, self.config)
        self.say(f"Size: {result.descriptor.size_bytes} bytes")
        self.say(f"Modified: {result.descriptor.modified_rfc3339}")
        self.say(f"Lines: {result.line_count}")
        if result.stats.is_reportable:
            self.say(f"Words: {result.stats.total_words}")
            self.say(f"Average word length: {result.stats.average_word_length}")
        self._report_outcomes(result.outcomes)
        self.say("File analysis complete.")

    def analyse_directory(self) -> None:
        root = self.ask("Folder (empty = base_dir): ") or self.config.base_dir
        result = engine.analyse_directory(root, self.config)
        self.say(f"Files: {len(result.descriptors)}")
        self.say(f"Merged lines: {len(result.merged)}")
        self._report_outcomes(result.outcomes)
        self.say("Folder analysis complete.")

    def analyse_wikipedia(self) -> None:
        article = self.ask("Article name (e.g. Go_(langage)): ")
        keyword = self.ask("Keyword: ")
        result = engine.analyse_wikipedia(article, keyword, self.config)
        self._report_outcomes(result.outcomes)
        self.say(f"Wikipedia analysis complete -> {result.output_path}")

    # Process actions

    def list_processes(self) -> None:
        for line in list_processes(self.config.process_top_n):
            self.say(line)

    def search_processes(self) -> None:
        keyword = self.ask("Keyword: ")
        for line in search_processes(keyword):
            self.say(line)

    def kill_process(self) -> None:
        pid = parse_pid(self.ask("PID to kill: "))
        self.say(f"About to kill process {pid}")
        if self.ask("Confirm (yes/no): ").lower() != "yes":
            self.say("Cancelled.")
            return
        kill_process(pid)
        self.say("Process terminated (if permitted).")

    # Lock actions

    def lock_file(self) -> None:
        path = lock_file(self.config.out_dir, self.ask("File name to lock: "))
        self.say(f"Locked: {path}")

    def unlock_file(self) -> None:
        unlock_file(self.config.out_dir, self.ask("File name to unlock: "))
        self.say("Unlocked.")
