"""Tab expansion."""

from __future__ import annotations

from collections.abc import Iterable

from .config import validate_tab_size
from .models import Line, ScanState
from .profiles import PLAIN_PROFILE, LanguageProfile
from .scanner import ensure_closed, scan_line


def expand_tab(column: int, tab_size: int) -> str:
    """Return the spaces that advance `column` to the next tab stop.

    Examples:
        expand_tab(5, 4)  # "   "
        expand_tab(0, 4)  # "    "
    """
    return " " * (tab_size - column % tab_size)


def untabify(
    lines: Iterable[Line], tab_size: int, profile: LanguageProfile = PLAIN_PROFILE
) -> list[Line]:
    """Replace tabs with spaces up to the next tab stop.

    Tabs are expanded anywhere on a line. Columns count emitted characters and
    restart at zero on every line. Under a string-aware profile, tabs inside
    string literals (ordinary or multi-line) are kept as they are.

    Args:
        lines: Lines of the document, in order.
        tab_size: Columns between tab stops.
        profile: Language conventions to apply.

    Returns:
        list[Line]: New lines with the original terminators.

    Raises:
        InvalidConfigurationError: If `tab_size` is not a positive integer.
        MalformedStringRegionError: If the document ends inside a multi-line string.

    Examples:
        untabify(split_lines("a\\tb\\n"), 4)  # [Line("a   b", "\\n")]
    """
    validate_tab_size(tab_size)

    state = ScanState()
    result: list[Line] = []

    for line_number, line in enumerate(lines, start=1):
        if not profile.string_aware and "\t" not in line.content:
            result.append(line)
            continue

        parts: list[str] = []
        column = 0
        for token in scan_line(line.content, profile, state, line_number):
            if token.text == "\t" and not token.in_string:
                spaces = expand_tab(column, tab_size)
                parts.append(spaces)
                column += len(spaces)
            else:
                parts.append(token.text)
                column += len(token.text)

        result.append(line.with_content("".join(parts)))

    ensure_closed(state, profile)
    return result
