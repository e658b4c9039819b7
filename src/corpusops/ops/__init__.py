"""Operating-system helpers: processes and lock files."""

from corpusops.ops.locks import lock_file, lock_path, unlock_file
from corpusops.ops.processes import (
    kill_process,
    list_processes,
    parse_pid,
    search_processes,
)

__all__ = [
    "lock_file",
    "lock_path",
    "unlock_file",
    "kill_process",
    "list_processes",
    "parse_pid",
    "search_processes",
]
