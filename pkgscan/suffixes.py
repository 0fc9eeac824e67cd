"""Filename suffixes recognised for Python modules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from importlib import machinery
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ModuleSuffixes:
    """Ordered suffix lists per module category.

    Extension suffixes are matched in order and the first match wins, so
    platform-specific suffixes must come before generic ones such as ``.so``.
    """

    source: Tuple[str, ...] = ()
    bytecode: Tuple[str, ...] = ()
    debug_bytecode: Tuple[str, ...] = ()
    optimized_bytecode: Tuple[str, ...] = ()
    extension: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "ModuleSuffixes":
        return cls()

    @classmethod
    def from_interpreter(cls) -> "ModuleSuffixes":
        """Return the suffixes used by the running interpreter."""
        bytecode = tuple(machinery.BYTECODE_SUFFIXES)
        return cls(
            source=tuple(machinery.SOURCE_SUFFIXES),
            bytecode=bytecode,
            debug_bytecode=tuple(getattr(machinery, "DEBUG_BYTECODE_SUFFIXES", bytecode)),
            optimized_bytecode=tuple(
                getattr(machinery, "OPTIMIZED_BYTECODE_SUFFIXES", bytecode)
            ),
            extension=_most_specific_first(machinery.EXTENSION_SUFFIXES),
        )

    def with_overrides(self, **lists: Iterable[str] | None) -> "ModuleSuffixes":
        """Return a copy with the given categories replaced."""
        changes = {name: tuple(values) for name, values in lists.items() if values is not None}
        return replace(self, **changes)

    def match_extension(self, file_name: str) -> str | None:
        """Return the first extension suffix ``file_name`` ends with."""
        for suffix in self.extension:
            if file_name.endswith(suffix):
                return suffix
        return None


def _most_specific_first(suffixes: Iterable[str]) -> Tuple[str, ...]:
    # sorted() is stable, so equally long suffixes keep interpreter order.
    return tuple(sorted(suffixes, key=len, reverse=True))


__all__ = ["ModuleSuffixes"]
