"""Line reader for the classic java.util.Properties text grammar."""

from __future__ import annotations

import logging
import re
from typing import BinaryIO, Iterator, TextIO

from scripts.python.helpers.jproperties.config import PROPERTIES_ENCODING
from scripts.python.helpers.jproperties.errors import PropertiesFormatError
from scripts.python.helpers.jproperties.escape_codec import unescape

logger = logging.getLogger(__name__)

WHITESPACE = " \t\f"
SEPARATORS = "=:"
COMMENT_MARKERS = "#!"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _ends_with_continuation(line: str) -> bool:
    """True when the line ends in an odd run of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def iter_logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` with comments and blanks removed.

    Continuation lines are joined with their trailing backslash dropped and the
    next line's leading whitespace skipped. Line numbers are 1-based and point
    at the natural line where the logical line starts.
    """
    lines = _LINE_BREAK.split(text)
    index = 0
    while index < len(lines):
        line_number = index + 1
        line = lines[index].lstrip(WHITESPACE)
        index += 1
        if not line or line[0] in COMMENT_MARKERS:
            continue

        parts: list[str] = []
        while _ends_with_continuation(line):
            parts.append(line[:-1])
            if index >= len(lines):
                line = ""
                break
            line = lines[index].lstrip(WHITESPACE)
            index += 1
        parts.append(line)
        yield line_number, "".join(parts)


def split_key_value(line: str) -> tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value tokens."""
    length = len(line)
    key_end = 0
    value_start = length
    has_separator = False
    preceding_backslash = False
    while key_end < length:
        char = line[key_end]
        if not preceding_backslash and char in SEPARATORS:
            value_start = key_end + 1
            has_separator = True
            break
        if not preceding_backslash and char in WHITESPACE:
            value_start = key_end + 1
            break
        preceding_backslash = char == "\\" and not preceding_backslash
        key_end += 1

    while value_start < length:
        char = line[value_start]
        if char not in WHITESPACE:
            if has_separator or char not in SEPARATORS:
                break
            has_separator = True
        value_start += 1

    return line[:key_end], line[value_start:]


def parse_properties_text(text: str) -> list[tuple[str, str]]:
    """Parse decoded .properties text into ordered, unescaped (key, value) pairs."""
    pairs: list[tuple[str, str]] = []
    for line_number, line in iter_logical_lines(text):
        raw_key, raw_value = split_key_value(line)
        try:
            pairs.append((unescape(raw_key), unescape(raw_value)))
        except PropertiesFormatError as exc:
            raise exc.at_line(line_number) from exc
    return pairs


def read_properties(stream: BinaryIO | TextIO) -> list[tuple[str, str]]:
    """Read every (key, value) pair from a readable stream.

    Byte streams are decoded as ISO-8859-1. The stream is left open.
    """
    if getattr(stream, "closed", False):
        raise OSError("Cannot read properties from a closed stream.")
    data = stream.read()
    if isinstance(data, bytes):
        text = data.decode(PROPERTIES_ENCODING)
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(f"Stream returned {type(data).__name__}, expected bytes or str.")

    pairs = parse_properties_text(text)
    logger.debug("Parsed %d properties entries", len(pairs))
    return pairs


__all__ = [
    "iter_logical_lines",
    "parse_properties_text",
    "read_properties",
    "split_key_value",
]
