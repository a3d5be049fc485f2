"""Java-compatible .properties store, codec and stream reader/writer."""

from scripts.python.helpers.jproperties.errors import PropertiesFormatError
from scripts.python.helpers.jproperties.escape_codec import (
    escape,
    escape_comment,
    unescape,
)
from scripts.python.helpers.jproperties.reader import (
    iter_logical_lines,
    parse_properties_text,
    read_properties,
    split_key_value,
)
from scripts.python.helpers.jproperties.report import (
    changed_only,
    compare_properties,
    properties_frame,
)
from scripts.python.helpers.jproperties.store import JavaProperties
from scripts.python.helpers.jproperties.writer import (
    format_entry,
    render_properties,
    write_properties,
)

__all__ = [
    "JavaProperties",
    "PropertiesFormatError",
    "changed_only",
    "compare_properties",
    "escape",
    "escape_comment",
    "format_entry",
    "iter_logical_lines",
    "parse_properties_text",
    "properties_frame",
    "read_properties",
    "render_properties",
    "split_key_value",
    "unescape",
    "write_properties",
]
