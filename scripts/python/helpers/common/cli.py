"""Common CLI output and logging helpers."""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import Sequence

from scripts.python.helpers.common.paths import ensure_output_dir

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def print_table(rows: list[dict[str, str]], fields: Sequence[str], empty_message: str) -> None:
    """Print rows as a pipe-separated table with padded columns."""
    if not rows:
        print(empty_message)
        return

    widths: dict[str, int] = {}
    for field in fields:
        widths[field] = max(len(field), max(len(row[field]) for row in rows))

    header = " | ".join(field.ljust(widths[field]) for field in fields)
    divider = "-+-".join("-" * widths[field] for field in fields)
    print(header)
    print(divider)
    for row in rows:
        print(" | ".join(row[field].ljust(widths[field]) for field in fields))


def print_csv(rows: list[dict[str, str]], fields: Sequence[str]) -> None:
    writer = csv.DictWriter(sys.stdout, fieldnames=list(fields))
    writer.writeheader()
    for row in rows:
        writer.writerow(row)


def write_csv(rows: list[dict[str, str]], fields: Sequence[str], output_dir: str, file_name: str) -> Path:
    output_path = ensure_output_dir(output_dir) / file_name
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(fields))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return output_path
