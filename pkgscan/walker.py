"""Deterministic traversal of a distribution's directory tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List


class ScanError(RuntimeError):
    """Raised when the scanned tree cannot be classified reliably."""


def walk_tree_files(root: Path) -> Iterator[Path]:
    """Yield files below ``root`` with siblings in ascending filename order.

    Directories are descended into where they sort among their siblings but
    are never yielded themselves. Symbolic links to directories are skipped,
    since their names would otherwise be mistaken for package names.
    """
    yield from _walk(Path(root))


def _walk(directory: Path) -> Iterator[Path]:
    for entry in _sorted_entries(directory):
        _check_name(directory, entry.name)
        path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_linked_dir = not is_dir and entry.is_symlink() and entry.is_dir()
        except OSError as exc:
            raise ScanError(f"Unable to inspect directory entry {path}: {exc}") from exc
        if is_dir:
            yield from _walk(path)
        elif not is_linked_dir:
            yield path


def _sorted_entries(directory: Path) -> List[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise ScanError(f"Unable to read directory {directory}: {exc}") from exc


def _check_name(directory: Path, name: str) -> None:
    # Undecodable bytes surface as lone surrogates under surrogateescape.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ScanError(
            f"Path component {name!r} in {directory} is not valid text"
        ) from exc


__all__ = ["ScanError", "walk_tree_files"]
