"""
Command-line entry point.

    pseudoloc en.json -o en-XA.json [--format icu] [--merge] [-v]
    pseudoloc --text "Hello, world"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .catalog import CatalogConfig, CatalogError, OutputFormat, build_catalog
from .core.models import Literal, Message
from .core.utils import render_message
from .transform import pseudo_translate

logger = logging.getLogger("pseudoloc")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pseudoloc",
        description="Deterministic pseudo-translation of ICU message catalogs",
    )
    parser.add_argument("input", type=Path, nargs="?",
                        help="Catalog JSON mapping message ids to node lists")
    parser.add_argument("-o", "--output", type=Path,
                        help="Output catalog path")
    parser.add_argument("--format", choices=[f.value for f in OutputFormat],
                        default=OutputFormat.JSON.value,
                        help="Write node lists (json) or rendered ICU strings (icu)")
    parser.add_argument("--merge", action="store_true",
                        help="Merge into an existing output catalog instead of replacing it")
    parser.add_argument("--no-validate", action="store_true",
                        help="Skip schema validation of the input catalog")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation of the output (default: 2)")
    parser.add_argument("--text",
                        help="Pseudo-translate a single plain string and print it")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.text is not None:
        result = pseudo_translate(Message((Literal(args.text),)))
        print(render_message(result))
        return 0

    if args.input is None or args.output is None:
        parser.error("INPUT and --output are required unless --text is given")

    try:
        config = CatalogConfig(
            input_path=args.input,
            output_path=args.output,
            output_format=OutputFormat(args.format),
            validate=not args.no_validate,
            merge=args.merge,
            indent=args.indent,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        build_catalog(config)
    except CatalogError as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
