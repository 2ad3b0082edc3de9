"""CLI entry point: python -m looptomd -i INPUT -o OUTPUT [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from looptomd.converter import ConversionResult, convert_file
from looptomd.errors import (
    ConfigError,
    InputNotFoundError,
    InputReadError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
    UsageError,
)
from looptomd.settings import load_settings

logger = logging.getLogger(__name__)

_EXAMPLES = """\
examples:
  looptomd -i raw.html -o extracted_text.md
  looptomd --input notes.html --output notes.md
  looptomd myfile.html -o output.md
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        if "expected one argument" in message:
            raise MissingArgumentError(message)
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="looptomd",
        description="Extract meaningful content from Microsoft Loop HTML exports as Markdown.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("input_file", nargs="?", default=None, metavar="INPUT",
                        help="Input HTML file (same as --input)")
    parser.add_argument("-i", "--input", default=None, metavar="FILE",
                        help="Input HTML file (required)")
    parser.add_argument("-o", "--output", default=None, metavar="FILE",
                        help="Output markdown file (required)")
    parser.add_argument("--config", default=None, metavar="FILE",
                        help="YAML file overriding the extractor settings")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: INFO)")
    return parser


def _parse_args(parser: argparse.ArgumentParser, argv: list[str] | None) -> argparse.Namespace:
    """Parse *argv*, raising a :class:`UsageError` subclass on bad input."""
    args, extras = parser.parse_known_args(argv)

    for extra in extras:
        if extra.startswith("-"):
            raise UnknownOptionError(f"Unknown option '{extra}'.")
        raise UnexpectedArgumentError(f"Unexpected argument '{extra}'.")

    if args.input_file is not None:
        if args.input is not None:
            raise UnexpectedArgumentError(f"Unexpected argument '{args.input_file}'.")
        args.input = args.input_file

    if args.input is None:
        raise MissingArgumentError("Input file is required.")
    if args.output is None:
        raise MissingArgumentError("Output file is required.")
    return args


def _print_summary(result: ConversionResult) -> None:
    from rich.console import Console
    from rich.markup import escape

    console = Console()
    console.print(
        f"[bold green]Text extraction completed.[/bold green] "
        f"Output saved to: [yellow]{escape(str(result.output_path))}[/yellow]",
    )
    console.print(f"  Pages : {result.page_count}"
                  + (" [dim](<main> fallback)[/dim]" if result.used_fallback else ""))
    console.print(f"  Lines : {result.line_count}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print("Error: No arguments provided.", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    try:
        args = _parse_args(parser, argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Extractor settings: %s", settings)

    try:
        result = convert_file(args.input, args.output, settings)
    except (InputNotFoundError, InputReadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
