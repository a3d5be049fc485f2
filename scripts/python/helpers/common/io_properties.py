"""File-level helpers for Java-style .properties files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from scripts.python.helpers.jproperties.store import JavaProperties


def read_properties_file(
    path: Path | str,
    defaults: Mapping[str, str] | None = None,
) -> JavaProperties:
    """Load a .properties file into a new store backed by optional defaults."""
    file_path = Path(path)
    if not file_path.exists():
        raise ValueError(f"Missing properties file: {file_path}")

    props = JavaProperties(defaults)
    with file_path.open("rb") as handle:
        props.load(handle)
    return props


def write_properties_file(
    path: Path | str,
    props: JavaProperties,
    comments: str | None = None,
    sort_keys: bool | None = None,
    timestamp: bool | None = None,
) -> Path:
    """Store props to path, creating parent directories when needed."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("wb") as handle:
        props.store(handle, comments, sort_keys=sort_keys, timestamp=timestamp)
    return file_path


__all__ = ["read_properties_file", "write_properties_file"]
