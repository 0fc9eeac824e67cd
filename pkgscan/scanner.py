"""Find Python resources in a directory tree."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, Iterator, List

from .classifier import classify_entry
from .logging import get_logger
from .models import PendingResourceFile, PythonResource, SourceModule
from .normalizer import normalize_entry
from .registry import PackageRegistry
from .resolver import resolve_resource
from .suffixes import ModuleSuffixes
from .walker import walk_tree_files

_LOGGER = get_logger("scanner")


def find_python_resources(root: str | Path, suffixes: ModuleSuffixes) -> Iterator[PythonResource]:
    """Walk ``root`` and yield every resource addressable under it.

    Modules, extension modules, eggs and ``.pth`` files are yielded in walk
    order. Other files are held back until the walk is exhausted and then
    yielded as :class:`~pkgscan.models.DataResource` records in the order they
    were found, or dropped when no package encloses them.

    The returned iterator is lazy and can only be consumed once.
    """
    root_path = Path(root)
    registry = PackageRegistry()
    pending: List[PendingResourceFile] = []
    counts: Counter[str] = Counter()

    _LOGGER.debug("Scanning %s", root_path)

    for path in walk_tree_files(root_path):
        entry = normalize_entry(root_path, path)
        if entry is None:
            _LOGGER.debug("Skipping packaging metadata %s", path)
            counts["skipped"] += 1
            continue

        classified = classify_entry(entry, suffixes, registry)
        if isinstance(classified, PendingResourceFile):
            pending.append(classified)
            continue

        counts[type(classified).__name__] += 1
        yield classified

    # Every package is known now; resource addresses can be resolved.
    for item in pending:
        resource = resolve_resource(item, registry)
        if resource is None:
            _LOGGER.debug("Dropping %s: no enclosing package", item.relative_path.as_posix())
            counts["dropped"] += 1
            continue
        counts[type(resource).__name__] += 1
        yield resource

    _LOGGER.info(
        "Scan of %s found %d packages; %s",
        root_path,
        len(registry),
        ", ".join(f"{name}={count}" for name, count in sorted(counts.items())) or "no files",
    )


def find_python_modules(root: str | Path, suffixes: ModuleSuffixes) -> Dict[str, bytes]:
    """Return the source of every module below ``root`` keyed by module name.

    Keys are sorted. Raises :class:`OSError` when a module cannot be read.
    """
    modules: Dict[str, bytes] = {}
    for resource in find_python_resources(root, suffixes):
        if isinstance(resource, SourceModule):
            modules[resource.name] = resource.location.resolve()
    return dict(sorted(modules.items()))


class ResourceScanner:
    """Scans distribution trees with a fixed suffix table."""

    def __init__(self, suffixes: ModuleSuffixes | None = None) -> None:
        self.suffixes = suffixes if suffixes is not None else ModuleSuffixes.from_interpreter()

    def scan(self, root: str) -> Iterator[PythonResource]:
        """Return a lazy resource stream for the tree at ``root``."""
        root_path = self.check_root(root)
        _LOGGER.info("Scanning Python resources in %s", root_path)
        return find_python_resources(root_path, self.suffixes)

    def modules(self, root: str) -> Dict[str, bytes]:
        """Return module sources for the tree at ``root``."""
        root_path = self.check_root(root)
        _LOGGER.info("Collecting Python modules in %s", root_path)
        return find_python_modules(root_path, self.suffixes)

    @staticmethod
    def check_root(root: str) -> Path:
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise FileNotFoundError(f"Distribution path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Distribution path is not a directory: {root}")
        return root_path


__all__ = ["ResourceScanner", "find_python_resources", "find_python_modules"]
