"""Advisory lock files kept in the output folder."""

from pathlib import Path

from corpusops.errors import InputError

LOCK_SUFFIX = ".lock"


def lock_path(out_dir: Path | str, name: str) -> Path:
    name = name.strip()
    if not name:
        raise InputError("Invalid name")
    return Path(out_dir) / f"{name}{LOCK_SUFFIX}"


def lock_file(out_dir: Path | str, name: str) -> Path:
    """Create the lock file for `name`.

    Raises:
        InputError: If the name is empty, already locked, or cannot be locked
    """
    path = lock_path(out_dir, name)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # "x" mode fails if the lock already exists
        with path.open("x"):
            pass
    except FileExistsError:
        raise InputError(f"Already locked: {name}") from None
    except OSError as e:
        raise InputError(f"Cannot create lock {path}: {e.strerror or e}") from e
    return path


def unlock_file(out_dir: Path | str, name: str) -> Path:
    """Remove the lock file for `name`.

    Raises:
        InputError: If there is no such lock or it cannot be removed
    """
    path = lock_path(out_dir, name)
    try:
        path.unlink()
    except FileNotFoundError:
        raise InputError(f"Not locked: {name}") from None
    except OSError as e:
        raise InputError(f"Cannot remove lock {path}: {e.strerror or e}") from e
    return path
