"""Command-line entry point.

Usage:
    typedl10n [-o OUT] [--default-locale LOCALE] [--format FORMAT]
              [--strict] [--check] [-v] INPUT_DIR

Exit codes:
    0: Accessors generated (diagnostics, if any, were reported as warnings)
    1: Diagnostics found and --strict or --check given
    2: Fatal error (bad directory, file names, TOML, output path)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from typedl10n.collect import collect_and_build
from typedl10n.constants import DEFAULT_LOCALE, DEFAULT_OUTPUT_DIR
from typedl10n.diagnostics import DiagnosticFormatter, OutputFormat, Typedl10nError
from typedl10n.generate import generate

logger = logging.getLogger(__name__)

__all__ = ["main"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="typedl10n",
        description="Compile TOML translation files into typed TypeScript accessors.",
    )
    parser.add_argument("input_dir", help="Input directory containing translation files.")
    parser.add_argument(
        "--out", "-o",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for generated files (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--default-locale",
        default=DEFAULT_LOCALE,
        help=f"Initial runtime locale of the generated code (default: {DEFAULT_LOCALE}).",
    )
    parser.add_argument(
        "--format",
        choices=[str(f) for f in OutputFormat],
        default=str(OutputFormat.TEXT),
        help="Diagnostics output format.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not generate code when diagnostics exist.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only validate; never write output.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Collect, validate and generate."""
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=args.format == OutputFormat.TEXT and sys.stderr.isatty(),
    )

    try:
        result = collect_and_build(args.input_dir)
    except Typedl10nError as e:
        logger.error("%s", e)
        return 2

    if not result.diagnostics.is_empty():
        print(formatter.format(result.diagnostics), file=sys.stderr)
        print(formatter.summary(result.diagnostics), file=sys.stderr)
        if args.strict or args.check:
            return 1

    if args.check:
        return 0

    try:
        out = generate(
            args.out, result.locales, result.module, default_locale=args.default_locale
        )
    except (Typedl10nError, OSError) as e:
        logger.error("Failed to write output: %s", e)
        return 2

    logger.info("Wrote %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
