"""CLI entrypoints for pkgscan commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from .config import ConfigError, load_config
from .logging import configure_logging, get_logger
from .models import PythonResource
from .scanner import ResourceScanner
from .walker import ScanError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_scan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the distribution root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .pkgscan.yml file (defaults to the one in the scanned directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgscan",
        description="Classify the files of an installed Python distribution.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    resources_parser = subparsers.add_parser(
        "resources",
        help="List every module, extension, egg, .pth file and data resource.",
    )
    _add_verbose_option(resources_parser, suppress_default=True)
    _add_scan_arguments(resources_parser)
    resources_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON object per resource instead of plain text.",
    )

    modules_parser = subparsers.add_parser(
        "modules",
        help="List source modules with the size of their source code.",
    )
    _add_verbose_option(modules_parser, suppress_default=True)
    _add_scan_arguments(modules_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for pkgscan commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    as_json = bool(getattr(args, "json", False))
    configure_logging(verbose=bool(args.verbose), quiet=as_json)
    logger = get_logger("cli")

    try:
        root_path = ResourceScanner.check_root(args.path)
        config = load_config(args.config if args.config is not None else root_path)
        scanner = ResourceScanner(config.suffixes)
        if args.command == "resources":
            _print_resources(scanner.scan(args.path), as_json=as_json)
        elif args.command == "modules":
            for name, source in scanner.modules(args.path).items():
                print(f"{name}\t{len(source)}")
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, ScanError, OSError) as exc:
        logger.debug("Scan aborted", exc_info=True)
        parser.exit(1, f"pkgscan {args.command} failed: {exc}\nRun with --verbose for more details.\n")


def _print_resources(resources: Iterable[PythonResource], *, as_json: bool) -> None:
    for resource in resources:
        payload = resource.to_dict()
        if as_json:
            print(json.dumps(payload, sort_keys=True))
            continue
        name = payload.get("name", "-")
        print(f"{payload['kind']}\t{name}\t{payload['path']}")


if __name__ == "__main__":  # pragma: no cover
    main()
