"""Helper utilities for constructing temporary distribution trees in tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping

from pkgscan.models import PythonResource
from pkgscan.scanner import find_python_resources
from pkgscan.suffixes import ModuleSuffixes


class TreeBuilder:
    """Utility for writing files into a throwaway distribution and rescanning it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "dist"
        self.root.mkdir()

    def touch(self, paths: Iterable[str]) -> None:
        """Create empty files at the given relative paths."""
        self.write({relative: "" for relative in paths})

    def write(self, files: Mapping[str, str | bytes]) -> None:
        """Write `path -> contents` entries into the tree."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

    def scan(self, suffixes: ModuleSuffixes | None = None) -> List[PythonResource]:
        """Return every resource found in the tree."""
        table = suffixes if suffixes is not None else ModuleSuffixes.empty()
        return list(find_python_resources(self.root, table))

    def path(self, relative: str = "") -> Path:
        """Return an absolute path inside the tree."""
        return self.root / relative if relative else self.root


__all__ = ["TreeBuilder"]
