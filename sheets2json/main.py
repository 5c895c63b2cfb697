"""Entry point: fetch a sheet range and print it as a JSON array of objects.

Usage:
    sheets2json [OPTIONS] SPREADSHEET_ID [WORKSHEET] [RANGE]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from sheets2json.config import get_log_level, load_credential_info
from sheets2json.errors import EmptyResultError, Sheets2JsonError
from sheets2json.services.encoder import encode_record_set
from sheets2json.services.records import build_record_set
from sheets2json.services.sheets import VALUE_RENDER_OPTIONS, build_range, fetch_grid
from sheets2json.version import VERSION_STRING

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheets2json",
        description="Convert a Google Sheets range into a JSON array of objects.",
    )
    parser.add_argument("spreadsheet_id", metavar="SPREADSHEET_ID", help="Spreadsheet key")
    parser.add_argument("worksheet", metavar="WORKSHEET", nargs="?", help="Worksheet name (default: first sheet)")
    parser.add_argument("cell_range", metavar="RANGE", nargs="?", help="Cell range (default: A:ZZ)")
    parser.add_argument("-c", dest="credential_file", help="Path to credential JSON file")
    parser.add_argument("-o", dest="output_file", help="Output file (default: stdout)")
    parser.add_argument(
        "--render", choices=sorted(VALUE_RENDER_OPTIONS), default="formatted",
        help="How cell values are rendered by the API (default: formatted)",
    )
    parser.add_argument("--indent", type=int, default=2, help="Indent width; 0 for compact output (default: 2)")
    parser.add_argument("--version", action="version", version=VERSION_STRING, help="Show version information")
    return parser


def convert(args: argparse.Namespace) -> str:
    """Fetch the requested range and return the encoded JSON document."""
    credential_info = load_credential_info(args.credential_file)
    range_spec = build_range(args.worksheet, args.cell_range)

    grid = fetch_grid(credential_info, args.spreadsheet_id, range_spec, value_render=args.render)
    if not grid:
        raise EmptyResultError()

    records = build_record_set(grid)
    logger.info("Converted %d record(s)", len(records))
    return encode_record_set(records, indent=args.indent or None)


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.indent < 0:
        parser.error("--indent must be 0 or greater")

    try:
        document = convert(args)
        if args.output_file:
            try:
                with open(args.output_file, "w", encoding="utf-8") as f:
                    f.write(document + "\n")
            except OSError as e:
                logger.error("Error writing output file: %s", e)
                return 1
            logger.info("Data saved to %s", args.output_file)
        else:
            sys.stdout.write(document + "\n")
    except Sheets2JsonError as e:
        logger.error("%s", e)
        return 1
    return 0


def main() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
