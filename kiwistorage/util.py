"""Filesystem helpers used by the storage engine."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

__all__ = ["is_dir", "mkdir_with_path", "delete_dir", "unique_test_db_path"]


def is_dir(path: PathLike) -> bool:
    """Return whether ``path`` is a directory, following symlinks.

    Raises ``OSError`` (for example ``FileNotFoundError``) if the path
    cannot be inspected.
    """
    return stat.S_ISDIR(os.stat(path).st_mode)


def mkdir_with_path(path: PathLike, mode: int) -> None:
    """Create ``path`` and any missing parents, then apply ``mode`` to it."""
    os.makedirs(path, exist_ok=True)
    if os.name == "posix":
        os.chmod(path, mode)


def delete_dir(dirname: PathLike) -> None:
    """Remove the directory ``dirname`` together with everything inside it."""
    root = Path(dirname)
    for entry in root.iterdir():
        if is_dir(entry):
            delete_dir(entry)
        else:
            entry.unlink()
    root.rmdir()


def unique_test_db_path() -> Path:
    """Return a fresh, not yet existing path suitable for a throwaway database."""
    with tempfile.TemporaryDirectory() as scratch:
        return Path(scratch) / "kiwi-test-db"