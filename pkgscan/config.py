"""Configuration loading for pkgscan (.pkgscan.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .suffixes import ModuleSuffixes

CONFIG_FILENAME = ".pkgscan.yml"

_SUFFIX_CATEGORIES = (
    "source",
    "bytecode",
    "debug_bytecode",
    "optimized_bytecode",
    "extension",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanConfig:
    """Settings for scanning a distribution, as read from .pkgscan.yml."""

    suffixes: ModuleSuffixes = field(default_factory=ModuleSuffixes.from_interpreter)


def load_config(config_path: Path, *, defaults: Optional[ModuleSuffixes] = None) -> ScanConfig:
    """Load configuration from disk.

    Suffix categories missing from the file keep the values from ``defaults``,
    which in turn default to the running interpreter's suffixes.
    """
    config_file = _resolve_config_path(config_path)
    base = defaults if defaults is not None else ModuleSuffixes.from_interpreter()

    if not config_file.exists():
        return ScanConfig(suffixes=base)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    suffix_data = data.get("suffixes")
    if suffix_data is None:
        return ScanConfig(suffixes=base)
    if not isinstance(suffix_data, dict):
        raise ConfigError("'suffixes' must be a mapping of category to suffix list")

    unknown = sorted(set(suffix_data) - set(_SUFFIX_CATEGORIES))
    if unknown:
        raise ConfigError(f"Unknown suffix categories: {', '.join(map(str, unknown))}")

    overrides = {
        category: _as_suffix_list(category, suffix_data[category])
        for category in _SUFFIX_CATEGORIES
        if category in suffix_data
    }
    return ScanConfig(suffixes=base.with_overrides(**overrides))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_suffix_list(category: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Suffixes for '{category}' must be a list of strings")
    for item in value:
        if not item.startswith("."):
            raise ConfigError(f"Suffix {item!r} for '{category}' must start with '.'")
    return tuple(value)


__all__ = ["CONFIG_FILENAME", "ConfigError", "ScanConfig", "load_config"]
