"""Line splitting that keeps every line terminator."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Document, Line


def split_lines(content: str) -> list[Line]:
    """Split text into lines, keeping each line's terminator.

    ``"\\r\\n"``, a bare ``"\\r"`` and a bare ``"\\n"`` all end a line. Text after
    the last terminator becomes a final line with an empty terminator. Unlike
    `str.splitlines`, form feeds and other Unicode separators do not end a line.

    Args:
        content: Complete text of a document.

    Returns:
        list[Line]: Lines in document order; empty for empty input.

    Examples:
        split_lines("a\\r\\nb")  # [Line("a", "\\r\\n"), Line("b", "")]
    """
    lines: list[Line] = []
    start = 0
    i = 0
    length = len(content)

    while i < length:
        character = content[i]
        if character == "\r":
            end = i
            i += 1
            if i < length and content[i] == "\n":
                i += 1
        elif character == "\n":
            end = i
            i += 1
        else:
            i += 1
            continue

        lines.append(Line(content[start:end], content[end:i]))
        start = i

    if start < length:
        lines.append(Line(content[start:], ""))

    return lines


def join_lines(lines: Iterable[Line]) -> str:
    """Reassemble lines, terminators included, into a single string."""
    return "".join(line.text for line in lines)


def parse_document(content: str) -> Document:
    """Build a `Document` whose working lines start as a copy of `content`."""
    return Document(source=content, lines=split_lines(content))
