"""Process listing, search and termination through OS commands."""

import logging
import subprocess
import sys

from corpusops.analysis import filter_by_keyword
from corpusops.errors import InputError, ProcessOpError

logger = logging.getLogger(__name__)


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _listing_command() -> list[str]:
    if _is_windows():
        return ["tasklist", "/FO", "CSV"]
    return ["ps", "-Ao", "pid,comm"]


def _run(command: list[str]) -> str:
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=True)
    except FileNotFoundError as e:
        raise ProcessOpError(f"Command not available: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise ProcessOpError(f"{command[0]} failed: {detail}") from e
    return completed.stdout


def _process_lines() -> list[str]:
    return [line for line in _run(_listing_command()).splitlines() if line.strip()]


def list_processes(limit: int = 20) -> list[str]:
    """Return the first `limit` non-blank lines of the process listing."""
    return _process_lines()[: max(limit, 0)]


def search_processes(keyword: str) -> list[str]:
    """Return listing lines containing the keyword, ignoring case."""
    return filter_by_keyword(_process_lines(), keyword, case_sensitive=False).matching


def parse_pid(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InputError(f"Invalid PID: {text.strip()!r}") from None


def kill_process(pid: int) -> None:
    """Ask the OS to terminate a process.

    Raises:
        ProcessOpError: If the kill command fails (unknown PID, not permitted)
    """
    if _is_windows():
        command = ["taskkill", "/PID", str(pid), "/T"]
    else:
        command = ["kill", str(pid)]
    logger.debug(f"Running {' '.join(command)}")
    _run(command)
