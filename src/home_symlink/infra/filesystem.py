"""Infrastructure: blocking filesystem primitives.

Every function is a single syscall-level operation.  Nothing here
retries, logs, or swallows errors except :func:`read_text_or_empty`,
whose contract is to treat an unreadable file as empty.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def canonicalize(path: Path) -> Path:
    """Return the absolute, symlink-free real path of an existing *path*.

    Raises
    ------
    OSError
        If *path* does not exist or cannot be resolved.
    """
    return path.resolve(strict=True)


def read_link(path: Path) -> Path | None:
    """Return the recorded target of the symlink at *path*.

    Returns ``None`` when *path* is missing or is not a symlink.
    """
    try:
        return Path(os.readlink(path))
    except OSError:
        return None


def remove_tree(path: Path) -> None:
    """Recursively delete the directory at *path*.

    Refuses symlinks and plain files with :class:`OSError`.
    """
    shutil.rmtree(path)


def remove_file(path: Path) -> None:
    """Delete the file or symlink at *path* (never a real directory)."""
    os.remove(path)


def create_symlink(source: Path, destination: Path) -> None:
    """Create a symlink at *destination* pointing to *source*."""
    os.symlink(source, destination)


def read_text_or_empty(path: Path) -> str:
    """Read *path* as UTF-8, or return ``""`` if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""


def list_subdirectories(root: Path) -> list[Path]:
    """Return the immediate subdirectories of *root*, sorted by name.

    Raises
    ------
    OSError
        If *root* cannot be listed.
    """
    with os.scandir(root) as entries:
        dirs = [Path(entry.path) for entry in entries if entry.is_dir()]
    return sorted(dirs, key=lambda p: p.name)
