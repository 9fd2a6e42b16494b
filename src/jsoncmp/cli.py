"""jsoncmp CLI: inspect the completion candidates a configuration produces."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Any, Dict, List, Optional


# CLI flag -> FieldMapping / FormatSpec field
_MAPPING_FLAGS = (
    "label_field",
    "type_field",
    "doc_field",
    "fallback_doc_field",
    "detail_field",
    "fields_container",
)
_FORMAT_FLAGS = ("type_format", "doc_format")


def _build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge an optional options file with command-line overrides."""
    from .config import load_options

    base = load_options(args.config).model_dump()

    if args.paths:
        base["paths"] = [str(p) for p in args.paths]
    if args.pattern is not None:
        base["pattern"] = args.pattern
    for name in _MAPPING_FLAGS:
        value = getattr(args, name)
        if value is not None:
            base["mapping"][name] = value
    for name in _FORMAT_FLAGS:
        value = getattr(args, name)
        if value is not None:
            base["formatting"][name] = value
    return base


def _configure_logging(quiet: bool, verbose: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point for jsoncmp commands."""
    try:
        jsoncmp_version = get_version("jsoncmp")
    except PackageNotFoundError:
        jsoncmp_version = "dev"

    parser = argparse.ArgumentParser(
        prog="jsoncmp",
        description="jsoncmp: completion candidates extracted from JSON schema files"
    )
    parser.add_argument("--version", action="version", version=f"jsoncmp {jsoncmp_version}")
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress diagnostics below ERROR."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-file extraction details."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    complete_parser = subparsers.add_parser(
        "complete",
        help="Load schema files and print the completion candidates as JSON",
        parents=[parent_parser]
    )
    complete_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON options file"
    )
    complete_parser.add_argument(
        "--path",
        dest="paths",
        type=Path,
        action="append",
        default=None,
        help="Schema file or directory (repeatable; replaces paths from --config)"
    )
    complete_parser.add_argument(
        "--pattern",
        default=None,
        help="Regular expression selecting files inside directories (default: \\.json$)"
    )
    for name in _MAPPING_FLAGS + _FORMAT_FLAGS:
        complete_parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            default=None,
            help=f"Override {name}"
        )

    args = parser.parse_args(argv)

    if args.command == "complete":
        _configure_logging(args.quiet, args.verbose)
        try:
            from .api import complete
            from .config import OptionsError, load_options

            options = load_options(_build_options(args))
            result = complete(options)
            print(result.model_dump_json(by_alias=True, indent=2))
        except OptionsError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
