"""Rewrite entry paths that live below nested package roots."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Tuple

_SITE_PACKAGES = "site-packages"
_METADATA_SUFFIXES = (".dist-info", ".egg-info")
_EGG_SUFFIX = ".egg"
_EGG_INFO = "EGG-INFO"


@dataclass(frozen=True)
class NormalizedEntry:
    """A walked file with its path relative to the innermost package root."""

    path: Path
    relative_path: PurePath
    in_site_packages: bool = False

    @property
    def components(self) -> Tuple[str, ...]:
        return self.relative_path.parts

    @property
    def file_name(self) -> str:
        return self.relative_path.name


def normalize_entry(root: Path, path: Path) -> NormalizedEntry | None:
    """Return ``path`` relative to its package root, or ``None`` for metadata.

    ``site-packages`` directories directly below ``root`` and unpacked
    ``.egg`` directories each act as a package root of their own. Packaging
    metadata (``.dist-info``, ``.egg-info`` and an egg's ``EGG-INFO``) is
    excluded.
    """
    relative = path.relative_to(root)
    components = relative.parts

    if components[0].endswith(_METADATA_SUFFIXES):
        return None

    base = root
    in_site_packages = components[0] == _SITE_PACKAGES and len(components) > 1
    if in_site_packages:
        base = root / _SITE_PACKAGES
        relative = path.relative_to(base)
        components = relative.parts

    directories = components[:-1]
    if any(part.endswith(_EGG_SUFFIX) for part in directories):
        egg_root = base
        for part in directories:
            egg_root = egg_root / part
            if part.endswith(_EGG_SUFFIX):
                break
        relative = path.relative_to(egg_root)
        if relative.parts[0] == _EGG_INFO:
            return None

    return NormalizedEntry(path=path, relative_path=relative, in_site_packages=in_site_packages)


__all__ = ["NormalizedEntry", "normalize_entry"]
