"""Path helpers for tool outputs."""

from __future__ import annotations

from pathlib import Path


def ensure_output_dir(output_dir: str | None) -> Path:
    """Return the output directory path, creating it when needed."""
    target = Path(output_dir) if output_dir else Path.cwd()
    target.mkdir(parents=True, exist_ok=True)
    return target


def sibling_output_path(source: Path | str, suffix: str) -> Path:
    """Place an output next to source, e.g. ``app.properties`` -> ``app.normalized.properties``."""
    source_path = Path(source)
    return source_path.with_name(f"{source_path.stem}.{suffix}{source_path.suffix}")
