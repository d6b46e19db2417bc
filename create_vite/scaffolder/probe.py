"""Target directory inspection and cleanup."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from create_vite.utils import remove_path

# A freshly ``git init``-ed directory still counts as empty.
VCS_DIR = ".git"


class DirectoryState(str, Enum):
    """What the scaffolder finds at the target path."""
    ABSENT = "absent"
    EMPTY = "empty"
    NON_EMPTY = "non-empty"


def classify(path: str | Path) -> DirectoryState:
    """Classify *path* as absent, empty or non-empty.

    Raises:
        NotADirectoryError: If *path* exists but is not a directory.
    """
    target = Path(path)
    if not target.exists():
        return DirectoryState.ABSENT
    if not target.is_dir():
        raise NotADirectoryError(f"Target path is not a directory: {target}")
    entries = [entry.name for entry in target.iterdir()]
    if not entries or entries == [VCS_DIR]:
        return DirectoryState.EMPTY
    return DirectoryState.NON_EMPTY


def empty_dir(path: str | Path) -> None:
    """Delete everything inside *path* except the ``.git`` directory.

    Does nothing when *path* does not exist.
    """
    target = Path(path)
    if not target.exists():
        return
    for entry in target.iterdir():
        if entry.name == VCS_DIR:
            continue
        remove_path(entry)
