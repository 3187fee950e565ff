"""Command-line front end: ``json-inspector [options] FILE``.

Parses and validates arguments, configures logging, dispatches to
``inspect_file`` and reports any failure as a single ``Error: <message>``
line on stdout.  ``main()`` returns the process exit status instead of
raising: 0 on success (and for ``--help`` / ``--version``), 1 on error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from json_inspector import __version__
from json_inspector.api import inspect_file
from json_inspector.errors import ConfigurationError, InputPathError, JsonInspectorError
from json_inspector.options import resolve_options, select_method

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_EPILOG = """\
examples:
  json-inspector --view data.json
  json-inspector --count --depth 2 data.json
  json-inspector --view --root users[0] --exclude metadata data.json
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.  Help and version are handled by ``main``."""
    parser = _ArgumentParser(
        prog="json-inspector",
        description=(
            "Inspect the structure of a JSON document: print a tree view or "
            "count nodes per type."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("file", metavar="FILE", nargs="?", help="JSON file to inspect")

    methods = parser.add_argument_group("analysis method (exactly one)")
    methods.add_argument("-v", "--view", action="store_true", help="print a tree view")
    methods.add_argument(
        "-c", "--count", action="store_true", help="count nodes per type"
    )

    controls = parser.add_argument_group("traversal controls")
    controls.add_argument(
        "-r",
        "--root",
        metavar="PATH",
        help="start at this node: dotted (a.b[0]) or JSON Pointer (/a/b/0)",
    )
    controls.add_argument(
        "-d",
        "--depth",
        metavar="N",
        help="maximum recursion depth, a non-negative integer (default: unlimited)",
    )
    controls.add_argument(
        "-e", "--exclude", metavar="KEY", help="do not descend into members named KEY"
    )

    misc = parser.add_argument_group("other options")
    misc.add_argument("--ascii", action="store_true", help="use ASCII tree glyphs")
    misc.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="diagnostic logging level on stderr (default: WARNING)",
    )
    misc.add_argument("--version", action="store_true", help="print version and exit")
    misc.add_argument(
        "-h", "--help", action="store_true", help="show this help message and exit"
    )
    return parser


def _validate_input(raw: str | None) -> Path:
    if not raw:
        raise InputPathError("", "no input file given")
    path = Path(raw)
    if not path.exists():
        raise InputPathError(raw, "file does not exist")
    if not path.is_file():
        raise InputPathError(raw, "not a regular file")
    return path


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ConfigurationError as exc:
        print(f"Error: {exc}")
        return 1

    if args.help:
        parser.print_help(sys.stdout)
        return 0
    if args.version:
        print(f"json-inspector {__version__}")
        return 0

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        method = select_method(args.view, args.count)
        path = _validate_input(args.file)
        options = resolve_options(args.root, args.depth, args.exclude)
        logger.debug("Inspecting %s with %s (%s)", path, method, options)
        inspect_file(path, method, options, ascii_glyphs=args.ascii)
    except (JsonInspectorError, OSError) as exc:
        logger.debug("Analysis failed", exc_info=True)
        print(f"Error: {exc}")
        return 1
    return 0
