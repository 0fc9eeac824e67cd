"""Map normalized filesystem entries to resource records."""

from __future__ import annotations

from typing import Sequence, Union

from .models import (
    BytecodeModule,
    EggFile,
    ExtensionModule,
    FileLocation,
    OptimizationLevel,
    OtherFile,
    PendingResourceFile,
    PthFile,
    PythonResource,
    SourceModule,
)
from .normalizer import NormalizedEntry
from .registry import PackageRegistry
from .suffixes import ModuleSuffixes
from .walker import ScanError

INIT_STEM = "__init__"
PYCACHE_DIR = "__pycache__"

_OPT_SUFFIXES = (
    (".opt-1.pyc", OptimizationLevel.ONE),
    (".opt-2.pyc", OptimizationLevel.TWO),
)

Classified = Union[PythonResource, PendingResourceFile]


def classify_entry(
    entry: NormalizedEntry,
    suffixes: ModuleSuffixes,
    registry: PackageRegistry,
) -> Classified:
    """Classify ``entry`` and record any package it declares in ``registry``.

    Files that are neither modules nor eggs nor ``.pth`` files come back as
    :class:`PendingResourceFile`; their owning package is only known once the
    whole tree has been walked.
    """
    file_name = entry.file_name

    ext_suffix = suffixes.match_extension(file_name)
    if ext_suffix is not None:
        return _extension_module(entry, ext_suffix, registry)

    suffix = entry.relative_path.suffix
    if suffix == ".py":
        return _source_module(entry, registry)
    if suffix == ".pyc":
        return _bytecode_module(entry, registry)
    if suffix == ".egg":
        return EggFile(path=entry.path)
    if suffix == ".pth":
        return PthFile(path=entry.path)

    return PendingResourceFile(full_path=entry.path, relative_path=entry.relative_path)


def _extension_module(
    entry: NormalizedEntry, ext_suffix: str, registry: PackageRegistry
) -> ExtensionModule:
    package_parts = entry.components[:-1]
    module_name = entry.file_name[: -len(ext_suffix)]
    stem = "" if module_name == INIT_STEM else module_name
    package, full_name = _module_names(package_parts, module_name)
    registry.add(package)
    return ExtensionModule(
        package=package,
        stem=stem,
        full_name=full_name,
        path=entry.path,
        suffix=ext_suffix,
    )


def _source_module(entry: NormalizedEntry, registry: PackageRegistry) -> SourceModule:
    package_parts = entry.components[:-1]
    module_name = entry.relative_path.stem
    package, full_name = _module_names(package_parts, module_name)
    registry.add(package)
    return SourceModule(
        name=full_name,
        location=FileLocation(entry.path),
        is_package=module_name == INIT_STEM,
    )


def _bytecode_module(
    entry: NormalizedEntry, registry: PackageRegistry
) -> Union[BytecodeModule, OtherFile]:
    components = entry.components
    if len(components) < 2:
        raise ScanError(f"Encountered .pyc file with invalid path: {entry.relative_path}")

    if components[-2] != PYCACHE_DIR:
        return OtherFile(
            package=".".join(components[:-1]),
            stem=components[-1],
            full_name=".".join(components),
            path=entry.path,
        )

    # Cache files are named <module>.<tag>.pyc; the last stem segment is dropped.
    cache_stem = entry.relative_path.stem
    module_name = ".".join(cache_stem.split(".")[:-1])
    level = OptimizationLevel.ZERO
    for opt_suffix, opt_level in _OPT_SUFFIXES:
        if entry.file_name.endswith(opt_suffix):
            level = opt_level

    package, full_name = _module_names(components[:-2], module_name)
    registry.add(package)
    return BytecodeModule(
        name=full_name,
        optimization_level=level,
        location=FileLocation(entry.path),
    )


def _module_names(package_parts: Sequence[str], module_name: str) -> tuple[str, str]:
    names = list(package_parts)
    if module_name != INIT_STEM:
        names.append(module_name)
    full_name = ".".join(names)
    package = ".".join(package_parts) or full_name
    return package, full_name


__all__ = ["Classified", "INIT_STEM", "classify_entry"]
