"""Error types raised while reading Java-style .properties content."""

from __future__ import annotations


class PropertiesFormatError(ValueError):
    """Malformed escape sequence or unparsable line in .properties content."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is None:
            super().__init__(message)
        else:
            super().__init__(f"line {line_number}: {message}")

    def at_line(self, line_number: int) -> "PropertiesFormatError":
        """Return a copy of this error tagged with the line it came from."""
        return PropertiesFormatError(self.message, line_number)


__all__ = ["PropertiesFormatError"]
