"""Leading-space compaction into tabs."""

from __future__ import annotations

from collections.abc import Iterable

from .config import validate_tab_size
from .models import Line, ScanState
from .profiles import PLAIN_PROFILE, LanguageProfile
from .scanner import ensure_closed, scan_line


def compact_indent(num_spaces: int, tab_size: int, round_down: bool = False) -> str:
    """Render a run of leading spaces as tabs.

    Args:
        num_spaces: Length of the leading space run.
        tab_size: Columns between tab stops.
        round_down: Drop the remainder that does not fill a whole tab stop.

    Returns:
        str: Whole tab stops as tabs, followed by the remainder as spaces unless
            `round_down` is set.

    Examples:
        compact_indent(9, 4)  # "\\t\\t "
        compact_indent(9, 4, round_down=True)  # "\\t\\t"
    """
    tabs, remainder = divmod(num_spaces, tab_size)
    if round_down:
        return "\t" * tabs
    return "\t" * tabs + " " * remainder


def tabify(
    lines: Iterable[Line],
    tab_size: int,
    round_down: bool = False,
    profile: LanguageProfile = PLAIN_PROFILE,
) -> list[Line]:
    """Replace leading spaces with tabs.

    Only the run of spaces at the start of each line is rewritten; the first
    other character (or the end of the line) ends it, and everything after is
    copied unchanged. Normally runs after `untabify`, so leading tabs are not
    expected. Under a string-aware profile, a line that starts inside a
    multi-line string is left alone, and every line is still scanned so the
    multi-line state stays correct for the lines that follow.

    Args:
        lines: Lines of the document, in order.
        tab_size: Columns between tab stops.
        round_down: Drop leading spaces that do not fill a whole tab stop.
        profile: Language conventions to apply.

    Returns:
        list[Line]: New lines with the original terminators.

    Raises:
        InvalidConfigurationError: If `tab_size` is not a positive integer.
        MalformedStringRegionError: If the document ends inside a multi-line string.

    Examples:
        tabify(split_lines("         x\\n"), 4)  # [Line("\\t\\t x", "\\n")]
    """
    validate_tab_size(tab_size)

    state = ScanState()
    result: list[Line] = []

    for line_number, line in enumerate(lines, start=1):
        content = line.content

        if state.in_multi_line_string:
            new_content = content
        else:
            num_spaces = len(content) - len(content.lstrip(" "))
            indent = compact_indent(num_spaces, tab_size, round_down)
            new_content = indent + content[num_spaces:]

        if profile.string_aware:
            for _token in scan_line(content, profile, state, line_number):
                pass

        result.append(line if new_content == content else line.with_content(new_content))

    ensure_closed(state, profile)
    return result
