"""
Runtime configuration for writing .properties files.

Values are read from the environment once, at import. Keyword arguments
passed to the writer or store always take precedence.
"""

from __future__ import annotations

import os


def _parse_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(
        f"{name} must be one of 1/0, true/false, yes/no, on/off; got {value!r}"
    )


# On-disk character set of the format.
PROPERTIES_ENCODING = "iso-8859-1"

# Line terminator written after every header and entry line.
LINE_SEPARATORS = {"lf": "\n", "crlf": "\r\n"}
_line_separator_name = os.getenv("JPROPERTIES_LINE_SEPARATOR", "lf").strip().lower()
if _line_separator_name not in LINE_SEPARATORS:
    raise ValueError(
        "JPROPERTIES_LINE_SEPARATOR must be lf or crlf, got {!r}".format(
            _line_separator_name
        )
    )
LINE_SEPARATOR = LINE_SEPARATORS[_line_separator_name]

# Entries are written in table order unless sorting is switched on.
SORT_KEYS = _parse_bool_env("JPROPERTIES_SORT_KEYS", False)

# Toggle the generation timestamp comment at the top of stored files.
WRITE_TIMESTAMP = _parse_bool_env("JPROPERTIES_WRITE_TIMESTAMP", True)

# Java Date.toString() layout used for the timestamp comment.
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"
