"""Tests for pkgscan.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgscan.config import ConfigError, ScanConfig, load_config
from pkgscan.suffixes import ModuleSuffixes

DEFAULTS = ModuleSuffixes(source=(".py",), bytecode=(".pyc",), extension=(".so",))


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path, defaults=DEFAULTS)

    assert isinstance(config, ScanConfig)
    assert config.suffixes == DEFAULTS


def test_load_config_defaults_to_interpreter_suffixes(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.suffixes == ModuleSuffixes.from_interpreter()


def test_load_config_parses_suffix_overrides(tmp_path: Path) -> None:
    config_file = tmp_path / ".pkgscan.yml"
    config_file.write_text(
        """
suffixes:
  extension:
    - ".cpython-37m-x86_64-linux-gnu.so"
    - ".abi3.so"
    - ".so"
  optimized_bytecode: [".pyc"]
""",
        encoding="utf-8",
    )

    config = load_config(config_file, defaults=DEFAULTS)

    assert config.suffixes.extension == (".cpython-37m-x86_64-linux-gnu.so", ".abi3.so", ".so")
    assert config.suffixes.optimized_bytecode == (".pyc",)
    assert config.suffixes.source == (".py",)
    assert config.suffixes.bytecode == (".pyc",)


def test_load_config_accepts_custom_filename(tmp_path: Path) -> None:
    config_file = tmp_path / "scan.yml"
    config_file.write_text("suffixes:\n  extension: .pyd\n", encoding="utf-8")

    config = load_config(config_file, defaults=DEFAULTS)

    assert config.suffixes.extension == (".pyd",)


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".pkgscan.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path, defaults=DEFAULTS).suffixes == DEFAULTS


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- just\n- a list\n", "mapping at the root"),
        ("suffixes: [.so]\n", "must be a mapping"),
        ("suffixes:\n  native: [.so]\n", "Unknown suffix categories"),
        ("suffixes:\n  extension: [1, 2]\n", "list of strings"),
        ("suffixes:\n  extension: [so]\n", "must start with"),
        ("suffixes: {extension: [.so]\n", "Failed to parse"),
    ],
)
def test_load_config_rejects_malformed_files(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / ".pkgscan.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path, defaults=DEFAULTS)
