#!/usr/bin/env python3
"""
Markup Engine - command line entry point.

Parses a markup file (or stdin) and prints the tree.
"""

import argparse
import sys
from typing import List, Optional

from markup_engine import __version__
from markup_engine.dom.serializer import dump_tree, to_json, to_markup
from markup_engine.parser.errors import ParseError
from markup_engine.parser.html_parser import HTMLParser
from markup_engine.utils.config import Config
from markup_engine.utils.logging import get_default_log_file, log_exception, setup_logging

OUTPUT_FORMATS = ("tree", "json", "html")
DEFAULT_INDENT = 2

# --log-file given without a path, or logging.log_file set to this in the config
DEFAULT_LOG_FILE = "default"

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="markup-engine",
        description="Markup Engine - parse a subset of HTML into a tree")

    parser.add_argument("file", nargs="?", default="-",
                        help="File to parse, '-' or omitted for stdin")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format (default: output.format from the config)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum element nesting depth")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--log-file", nargs="?", const=DEFAULT_LOG_FILE, default=None,
                        help="Write a debug log to this file, or to "
                             "~/.markup_engine/logs/ when no path is given")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Markup Engine {__version__}")

    return parser.parse_args(argv)


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def render(document, output_format: str, indent: int) -> str:
    if output_format == "json":
        return to_json(document, indent=indent)
    if output_format == "html":
        return to_markup(document)
    return dump_tree(document, indent=indent)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_args(argv)
    config = Config(args.config)

    log_file = args.log_file or config.get("logging.log_file")
    if log_file == DEFAULT_LOG_FILE:
        log_file = get_default_log_file()

    logger = setup_logging(
        log_file=log_file,
        console_level="DEBUG" if args.debug else config.get("logging.console_level", "WARNING"),
        file_level=config.get("logging.file_level", "DEBUG"))
    logger.info(f"Markup Engine v{__version__}")

    output_format = args.format or config.get("output.format", "tree")
    if output_format not in OUTPUT_FORMATS:
        logger.warning(f"Unknown output format {output_format!r} in config, using 'tree'")
        output_format = "tree"
    indent = config.get("output.indent", DEFAULT_INDENT)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        logger.warning(f"Invalid output indent {indent!r} in config, using {DEFAULT_INDENT}")
        indent = DEFAULT_INDENT

    try:
        parser = HTMLParser(config=config, max_depth=args.max_depth)
    except ValueError as e:
        print(f"markup-engine: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    try:
        markup = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        log_exception(logger, e, f"Could not read {args.file}")
        print(f"markup-engine: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    try:
        document = parser.parse(markup)
    except ParseError as e:
        logger.debug(f"Parse error in {args.file}: {e.kind.value} at offset {e.offset}")
        print(f"{args.file}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        output = render(document, output_format, indent)
    except ValueError as e:
        print(f"{args.file}: cannot write as {output_format}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
