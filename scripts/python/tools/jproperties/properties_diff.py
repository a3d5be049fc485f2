#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Compare two .properties files key by key after unescaping.

Escaping differences (``\\u00e9`` vs ``é``, ``a\\:b`` vs ``a\\u003Ab``) do not
count as changes. Exits with status 1 when any key was added, removed or
changed, 0 when the files match, 2 when either file cannot be read.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter

from scripts.python.helpers.common.cli import configure_logging, print_csv, print_table, write_csv
from scripts.python.helpers.common.io_properties import read_properties_file
from scripts.python.helpers.jproperties.report import (
    DIFF_COLUMNS,
    STATUS_ADDED,
    STATUS_CHANGED,
    STATUS_REMOVED,
    STATUS_SAME,
    changed_only,
    compare_properties,
)


OUTPUT_FILE_NAME = "PropertiesDiff.csv"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare two .properties files.")
    parser.add_argument("left", help="Baseline .properties file.")
    parser.add_argument("right", help=".properties file compared against the baseline.")
    parser.add_argument(
        "--emit-format",
        choices=["table", "csv"],
        default="table",
        help="Terminal output format (default: table).",
    )
    parser.add_argument(
        "--include-same",
        action="store_true",
        help="Also list keys whose values are identical.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Optional output directory for CSV export.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _cell(value: object) -> str:
    return "" if value is None else str(value)


def main() -> None:
    args = build_arg_parser().parse_args()
    configure_logging(args.verbose)

    try:
        left = read_properties_file(args.left)
        right = read_properties_file(args.right)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    diff = compare_properties(left, right)
    counts = Counter(diff["status"])
    shown = diff if args.include_same else changed_only(diff)
    rows = [{field: _cell(record[field]) for field in DIFF_COLUMNS} for record in shown.to_dict("records")]

    print("Properties diff")
    print(f"Left: {args.left}")
    print(f"Right: {args.right}")
    print(
        "Statuses: "
        + ", ".join(
            f"{name}={counts.get(name, 0)}"
            for name in (STATUS_ADDED, STATUS_REMOVED, STATUS_CHANGED, STATUS_SAME)
        )
    )
    print("")

    if args.emit_format == "table":
        print_table(rows, DIFF_COLUMNS, "No differences found.")
    else:
        print_csv(rows, DIFF_COLUMNS)

    if args.output_dir:
        output_path = write_csv(rows, DIFF_COLUMNS, args.output_dir, OUTPUT_FILE_NAME)
        print(f"\nWrote: {output_path}")

    differences = sum(counts.get(name, 0) for name in (STATUS_ADDED, STATUS_REMOVED, STATUS_CHANGED))
    sys.exit(1 if differences else 0)


if __name__ == "__main__":
    main()
