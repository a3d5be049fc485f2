"""Escape codec for the ISO-8859-1 .properties text format.

Keys and values are held as ordinary Unicode strings in memory. On disk every
character outside printable ASCII is written as a ``\\uXXXX`` escape, and the
characters that carry meaning in the line grammar are backslash-prefixed.
"""

from __future__ import annotations

from scripts.python.helpers.jproperties.errors import PropertiesFormatError


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Control characters with a single-letter escape form.
LETTER_ESCAPES = {"\t": "t", "\n": "n", "\r": "r", "\f": "f"}
LETTER_UNESCAPES = {letter: char for char, letter in LETTER_ESCAPES.items()}

# Delimiter and comment characters; only keys need them escaped.
KEY_SPECIALS = frozenset("=:#!")

FIRST_PRINTABLE = 0x20
LAST_PRINTABLE = 0x7E
LAST_LATIN_1 = 0xFF


def _unicode_escape(code_point: int) -> str:
    """Return the ``\\uXXXX`` form, split into a surrogate pair above the BMP."""
    if code_point > 0xFFFF:
        offset = code_point - 0x10000
        high = 0xD800 + (offset >> 10)
        low = 0xDC00 + (offset & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code_point:04X}"


def escape(text: str, is_key: bool = False) -> str:
    """Escape a key or value for one line of a .properties file.

    The result holds printable ASCII only. Spaces are escaped throughout a key
    but only in first position of a value, since the reader skips whitespace
    before a value and nowhere else.
    """
    out: list[str] = []
    for index, char in enumerate(text):
        if char == "\\":
            out.append("\\\\")
        elif char == " ":
            out.append("\\ " if is_key or index == 0 else " ")
        elif char in LETTER_ESCAPES:
            out.append("\\" + LETTER_ESCAPES[char])
        elif is_key and char in KEY_SPECIALS:
            out.append("\\" + char)
        elif FIRST_PRINTABLE <= ord(char) <= LAST_PRINTABLE:
            out.append(char)
        else:
            out.append(_unicode_escape(ord(char)))
    return "".join(out)


def _join_surrogates(text: str) -> str:
    # High+low pairs become one code point; lone halves stay as they are.
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        high = ord(text[index])
        if 0xD800 <= high <= 0xDBFF and index + 1 < length:
            low = ord(text[index + 1])
            if 0xDC00 <= low <= 0xDFFF:
                out.append(chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)))
                index += 2
                continue
        out.append(text[index])
        index += 1
    return "".join(out)


def unescape(text: str) -> str:
    """Decode a raw key or value token read from a .properties file.

    Adjacent escaped surrogate halves are joined, so a str that already held a
    split surrogate pair reads back as the single combined character.
    """
    out: list[str] = []
    saw_surrogate = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue

        if index >= length:
            raise PropertiesFormatError("Trailing backslash with nothing to escape.")
        char = text[index]
        index += 1

        if char == "u":
            digits = text[index : index + 4]
            if len(digits) < 4 or not all(digit in HEX_DIGITS for digit in digits):
                raise PropertiesFormatError(f"Malformed \\uXXXX escape: \\u{digits}")
            index += 4
            code_unit = int(digits, 16)
            if 0xD800 <= code_unit <= 0xDFFF:
                saw_surrogate = True
            out.append(chr(code_unit))
        else:
            out.append(LETTER_UNESCAPES.get(char, char))

    result = "".join(out)
    if saw_surrogate:
        result = _join_surrogates(result)
    return result


def escape_comment(comment: str) -> list[str]:
    """Split a header comment into ``#``-prefixed lines safe for ISO-8859-1.

    Characters above U+00FF become ``\\uXXXX``. A line break starts a new
    comment line, and the ``#`` marker is only added when the following text
    does not already open with ``#`` or ``!``.
    """
    lines: list[str] = []
    current: list[str] = ["#"]
    index = 0
    length = len(comment)
    while index < length:
        char = comment[index]
        index += 1
        if char in "\r\n":
            if char == "\r" and index < length and comment[index] == "\n":
                index += 1
            lines.append("".join(current))
            if index < length and comment[index] in "#!":
                current = []
            else:
                current = ["#"]
        elif ord(char) > LAST_LATIN_1:
            current.append(_unicode_escape(ord(char)))
        else:
            current.append(char)
    lines.append("".join(current))
    return lines


__all__ = ["escape", "escape_comment", "unescape"]
