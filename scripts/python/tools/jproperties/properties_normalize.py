#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rewrite a .properties file in canonical form.

Comments, blank lines, continuation lines and redundant escapes are dropped;
every entry is written as one ``key=value`` line with the minimal escaping
needed to read it back unchanged.
"""

from __future__ import annotations

import argparse
import logging
import sys

from scripts.python.helpers.common.cli import configure_logging
from scripts.python.helpers.common.io_properties import read_properties_file, write_properties_file
from scripts.python.helpers.common.paths import sibling_output_path

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rewrite a .properties file in canonical form.")
    parser.add_argument("input", help=".properties file to normalize.")
    parser.add_argument(
        "--output",
        default=None,
        help="Destination file (default: <input stem>.normalized.properties next to the input).",
    )
    parser.add_argument("--comment", default=None, help="Optional header comment.")
    parser.add_argument(
        "--sort-keys",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Sort entries by key (default: JPROPERTIES_SORT_KEYS, else off).",
    )
    parser.add_argument(
        "--no-timestamp",
        action="store_true",
        help="Omit the generation timestamp comment.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main() -> None:
    args = build_arg_parser().parse_args()
    configure_logging(args.verbose)

    try:
        props = read_properties_file(args.input)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    output_path = args.output or sibling_output_path(args.input, "normalized")
    logger.debug("Normalizing %s into %s", args.input, output_path)
    written = write_properties_file(
        output_path,
        props,
        comments=args.comment,
        sort_keys=args.sort_keys,
        timestamp=False if args.no_timestamp else None,
    )
    print(f"Entries: {len(props)}")
    print(f"Wrote: {written}")


if __name__ == "__main__":
    main()
