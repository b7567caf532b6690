"""Parser for the flat ``.properties`` line format."""

import re
from collections.abc import Iterator
from pathlib import Path

from blueprint_config.errors import MalformedSourceError

# Whitespace as understood by the properties format (no newlines here)
WHITESPACE = " \t\f"
COMMENT_CHARS = "#!"
KEY_TERMINATORS = "=:" + WHITESPACE

NATURAL_LINE_RE = re.compile(r"\r\n|\r|\n")
HEX4_RE = re.compile(r"[0-9A-Fa-f]{4}")

SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str, source: Path) -> dict[str, str]:
    """Parse properties text into a flat mapping.

    Accepts ``key=value``, ``key: value`` and ``key value`` entries, ``#`` and
    ``!`` comments, backslash line continuations and the usual escapes. A
    repeated key keeps its last value. Values are returned as written, without
    trimming. ``source`` is only used to label errors.
    """
    properties: dict[str, str] = {}
    for line_no, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, source, line_no)
        properties[key] = _unescape(raw_value, source, line_no)
    return properties


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Join continued natural lines, dropping blanks and comments."""
    buffer: str | None = None
    start = 0
    for line_no, natural in enumerate(NATURAL_LINE_RE.split(text), start=1):
        piece = natural.lstrip(WHITESPACE)
        if buffer is None:
            if not piece or piece[0] in COMMENT_CHARS:
                continue
            buffer = ""
            start = line_no

        trailing = len(piece) - len(piece.rstrip("\\"))
        if trailing % 2 == 1:
            buffer += piece[:-1]
            continue

        yield start, buffer + piece
        buffer = None

    # Continuation on the final line
    if buffer is not None:
        yield start, buffer


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its raw key and raw value."""
    end = 0
    escaped = False
    while end < len(line):
        char = line[end]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in KEY_TERMINATORS:
            break
        end += 1

    rest = line[end:].lstrip(WHITESPACE)
    if rest and rest[0] in "=:":
        rest = rest[1:].lstrip(WHITESPACE)
    return line[:end], rest


def _unescape(raw: str, source: Path, line_no: int) -> str:
    if "\\" not in raw:
        return raw

    out = []
    i = 0
    while i < len(raw):
        char = raw[i]
        i += 1
        if char != "\\":
            out.append(char)
            continue
        if i >= len(raw):
            break
        char = raw[i]
        i += 1
        if char == "u":
            digits = raw[i : i + 4]
            if not HEX4_RE.fullmatch(digits):
                msg = f"malformed \\uxxxx escape on line {line_no}"
                raise MalformedSourceError(source, msg)
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(SIMPLE_ESCAPES.get(char, char))
    return "".join(out)
