"""Set of package names observed during a scan."""

from __future__ import annotations

from typing import Iterator, Set


class PackageRegistry:
    """Insertion-only collection of dotted package names."""

    def __init__(self) -> None:
        self._packages: Set[str] = set()

    def add(self, package: str) -> None:
        self._packages.add(package)

    def __contains__(self, package: object) -> bool:
        return package in self._packages

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._packages))

    def __len__(self) -> int:
        return len(self._packages)


__all__ = ["PackageRegistry"]
