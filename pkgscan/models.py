"""Resource records produced by a filesystem scan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Dict, Union


class OptimizationLevel(Enum):
    """Bytecode optimization level encoded in a ``__pycache__`` filename."""

    ZERO = 0
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class FileLocation:
    """Deferred reference to the contents of a file on disk."""

    path: Path

    def resolve(self) -> bytes:
        """Read and return the file contents."""
        return self.path.read_bytes()


@dataclass(frozen=True)
class SourceModule:
    """Python module source code, i.e. a ``.py`` file."""

    name: str
    location: FileLocation
    is_package: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "source",
            "name": self.name,
            "is_package": self.is_package,
            "path": str(self.location.path),
        }


@dataclass(frozen=True)
class BytecodeModule:
    """Compiled bytecode found in a ``__pycache__`` directory."""

    name: str
    optimization_level: OptimizationLevel
    location: FileLocation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "bytecode",
            "name": self.name,
            "optimization_level": self.optimization_level.value,
            "path": str(self.location.path),
        }


@dataclass(frozen=True)
class ExtensionModule:
    """Compiled extension module, i.e. a ``.so`` or ``.pyd`` file."""

    package: str
    stem: str
    full_name: str
    path: Path
    suffix: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "extension",
            "name": self.full_name,
            "package": self.package,
            "stem": self.stem,
            "suffix": self.suffix,
            "path": str(self.path),
        }


@dataclass(frozen=True)
class DataResource:
    """Non-module file addressable through a package's resource reader."""

    full_name: str
    leaf_package: str
    relative_name: str
    location: FileLocation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "resource",
            "name": self.full_name,
            "leaf_package": self.leaf_package,
            "relative_name": self.relative_name,
            "path": str(self.location.path),
        }


@dataclass(frozen=True)
class EggFile:
    """Zipped egg archive."""

    path: Path

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "egg", "path": str(self.path)}


@dataclass(frozen=True)
class PthFile:
    """Path extension file read by the ``site`` module."""

    path: Path

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "pth", "path": str(self.path)}


@dataclass(frozen=True)
class OtherFile:
    """Bytecode file outside a ``__pycache__`` directory, e.g. from Python 2."""

    package: str
    stem: str
    full_name: str
    path: Path

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "other",
            "name": self.full_name,
            "package": self.package,
            "stem": self.stem,
            "path": str(self.path),
        }


@dataclass(frozen=True)
class PendingResourceFile:
    """Non-module file whose owning package is resolved after the walk."""

    full_path: Path
    relative_path: PurePath


PythonResource = Union[
    SourceModule,
    BytecodeModule,
    ExtensionModule,
    DataResource,
    EggFile,
    PthFile,
    OtherFile,
]


__all__ = [
    "BytecodeModule",
    "DataResource",
    "EggFile",
    "ExtensionModule",
    "FileLocation",
    "OptimizationLevel",
    "OtherFile",
    "PendingResourceFile",
    "PthFile",
    "PythonResource",
    "SourceModule",
]
