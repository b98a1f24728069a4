"""
File system helpers: source tree walking and whole-file map I/O.
"""

import os
from pathlib import Path
from typing import Iterable, List

from .report import log_err


def files_in_path(root_path) -> List[Path]:
    """
    List every regular file under root_path.

    A file path is returned as-is. Directories are walked depth first;
    a directory that cannot be read is reported and skipped. Symlinks
    are not followed.
    """
    root_path = Path(root_path)
    if root_path.is_file():
        return [root_path]

    files = []
    dir_stack = [root_path]

    while dir_stack:
        path = dir_stack.pop()
        try:
            entries = list(os.scandir(path))
        except OSError as e:
            log_err(f"Failed to read directory {path}: {e}")
            continue

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    dir_stack.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    files.append(Path(entry.path))
            except OSError as e:
                log_err(f"Failed to stat {entry.path}: {e}")
                continue

    return files


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """Check a path's extension (without the dot) against a list."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:] in extensions


def read_text(path) -> str:
    """Read a whole text file as UTF-8, keeping line endings intact."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path, text: str) -> None:
    """
    Overwrite a whole text file as UTF-8.

    Opens the path itself, so a symlinked or hard-linked map is updated
    in place.
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
