#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
List every key visible in a .properties file, with defaults resolved.

Each row records the unescaped value and whether it was set in the file
itself or inherited from the defaults file.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter

from scripts.python.helpers.common.cli import configure_logging, print_csv, print_table, write_csv
from scripts.python.helpers.common.io_properties import read_properties_file
from scripts.python.helpers.jproperties.report import properties_frame


FIELDS = ["key", "value", "source"]
OUTPUT_FILE_NAME = "PropertiesInventory.csv"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List the keys visible in a .properties file.")
    parser.add_argument(
        "--config-path",
        required=True,
        help="Path to the .properties file to inspect.",
    )
    parser.add_argument(
        "--defaults-path",
        default=None,
        help="Optional .properties file used as the defaults table.",
    )
    parser.add_argument(
        "--emit-format",
        choices=["table", "csv"],
        default="table",
        help="Terminal output format (default: table).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Optional output directory for CSV export.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main() -> None:
    args = build_arg_parser().parse_args()
    configure_logging(args.verbose)

    try:
        defaults = read_properties_file(args.defaults_path) if args.defaults_path else None
        props = read_properties_file(args.config_path, defaults)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    frame = properties_frame(props)
    rows = [{field: str(record[field]) for field in FIELDS} for record in frame.to_dict("records")]

    print("Properties inventory")
    print(f"Config: {args.config_path}")
    if args.defaults_path:
        print(f"Defaults: {args.defaults_path}")
    print(f"Count: {len(rows)}")
    counts = Counter(row["source"] for row in rows)
    print("Sources: " + ", ".join(f"{name}={counts.get(name, 0)}" for name in ("table", "defaults")))
    print("")

    if args.emit_format == "table":
        print_table(rows, FIELDS, "No properties found.")
    else:
        print_csv(rows, FIELDS)

    if args.output_dir:
        output_path = write_csv(rows, FIELDS, args.output_dir, OUTPUT_FILE_NAME)
        print(f"\nWrote: {output_path}")


if __name__ == "__main__":
    main()
