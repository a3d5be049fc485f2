"""Writer for Java-style .properties output."""

from __future__ import annotations

import io
import logging
from datetime import datetime
from typing import BinaryIO, Iterable, TextIO

from scripts.python.helpers.jproperties import config
from scripts.python.helpers.jproperties.escape_codec import escape, escape_comment

logger = logging.getLogger(__name__)


def _is_text_stream(stream: BinaryIO | TextIO) -> bool:
    if isinstance(stream, io.TextIOBase):
        return True
    # Wrappers such as SpooledTemporaryFile only expose their mode.
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def format_entry(key: str, value: str) -> str:
    """Return one ``key=value`` line without its terminator."""
    return f"{escape(key, is_key=True)}={escape(value)}"


def render_properties(
    entries: Iterable[tuple[str, str]],
    comments: str | None = None,
    *,
    sort_keys: bool | None = None,
    timestamp: bool | None = None,
    line_separator: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Render the full file text: timestamp line, comment lines, then entries."""
    if sort_keys is None:
        sort_keys = config.SORT_KEYS
    if timestamp is None:
        timestamp = config.WRITE_TIMESTAMP
    if line_separator is None:
        line_separator = config.LINE_SEPARATOR

    lines: list[str] = []
    if timestamp:
        stamp_time = generated_at or datetime.now().astimezone()
        lines.append("#" + stamp_time.strftime(config.TIMESTAMP_FORMAT))
    if comments is not None:
        lines.extend(escape_comment(comments))

    items = sorted(entries, key=lambda item: item[0]) if sort_keys else list(entries)
    lines.extend(format_entry(key, value) for key, value in items)
    return "".join(line + line_separator for line in lines)


def write_properties(
    stream: BinaryIO | TextIO,
    entries: Iterable[tuple[str, str]],
    comments: str | None = None,
    *,
    sort_keys: bool | None = None,
    timestamp: bool | None = None,
    line_separator: str | None = None,
    generated_at: datetime | None = None,
) -> None:
    """Write entries to a stream as ISO-8859-1 .properties text.

    Text streams receive the rendered string unchanged. The stream is flushed
    but never closed.
    """
    if getattr(stream, "closed", False):
        raise OSError("Cannot store properties to a closed stream.")

    text = render_properties(
        entries,
        comments,
        sort_keys=sort_keys,
        timestamp=timestamp,
        line_separator=line_separator,
        generated_at=generated_at,
    )
    if _is_text_stream(stream):
        stream.write(text)
    else:
        stream.write(text.encode(config.PROPERTIES_ENCODING))
    stream.flush()
    logger.debug("Wrote %d characters of properties output", len(text))


__all__ = ["format_entry", "render_properties", "write_properties"]
