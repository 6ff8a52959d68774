"""Command line for html_table.

Builds an HTML table from a file of delimited lines, or with ``--reverse``
turns the first HTML table of a file back into delimited lines.

Usage:
    html-table -i data.txt -o table.html -s ,
    html-table -i table.html -o data.txt -s , --reverse
    python -m html_table -i data.txt -o table.html

Exit codes: 0 on success (skipped rows are logged as warnings), 1 when the
input has no usable table, 2 for file or configuration problems.
"""

import argparse
import logging
import sys

from html_table import __version__, pipeline
from html_table.config import check_separator, load_settings
from html_table.errors import ConfigurationError, ResourceError, StructuralFormatError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_RESOURCE_ERROR = 2


def _separator(value: str) -> str:
    """argparse type: a single character."""
    try:
        return check_separator(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-table",
        description="Build an HTML table from a list of lines with an optional separator, or convert an HTML table back to separated lines",
    )
    parser.add_argument("-i", "--input", required=True, help="Path of input file, relative to current path")
    parser.add_argument("-o", "--output", required=True, help="Path of output file, relative to current path")
    parser.add_argument("-s", "--separator", type=_separator, default=None, help="Character separating fields inside lines (default: space)")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse mode: HTML table to plain text with separator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the conversion, and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        settings = load_settings(separator=args.separator, reverse=args.reverse)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_RESOURCE_ERROR

    logger.info("Input file: %s", args.input)
    logger.info("Output file: %s", args.output)
    logger.info("Separator: '%s'", settings.separator)
    logger.info("Reverse mode: %s", settings.reverse)

    try:
        warnings = pipeline.run(args.input, args.output, settings)
    except StructuralFormatError as exc:
        logger.error("No table converted: %s", exc)
        return EXIT_FORMAT_ERROR
    except ResourceError as exc:
        logger.error("%s", exc)
        return EXIT_RESOURCE_ERROR

    for warning in warnings:
        logger.warning("%s", warning)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
