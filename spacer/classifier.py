"""Beginning-of-line whitespace counting."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Line, ScanState, WhitespaceTally
from .profiles import PLAIN_PROFILE, LanguageProfile
from .scanner import ensure_closed, scan_line


def _count_leading(text: str, tally: WhitespaceTally) -> None:
    for character in text:
        if character == " ":
            tally.space_count += 1
        elif character == "\t":
            tally.tab_count += 1
        else:
            break


def count_bol_whitespace(
    lines: Iterable[Line], profile: LanguageProfile = PLAIN_PROFILE
) -> WhitespaceTally:
    """Tally beginning-of-line tabs and spaces across a document.

    With a plain profile only the leading run of each line is examined. With a
    string-aware profile the whole line is scanned so that string regions opened
    anywhere on it are tracked, and whitespace inside strings is never counted.
    A line that starts inside a multi-line string carried over from an earlier
    line counts nothing until that string closes; the whitespace run right after
    the closing quote is then counted as a fresh line start.

    Args:
        lines: Lines of the document, in order.
        profile: Language conventions to apply.

    Returns:
        WhitespaceTally: Accumulated tab and space counts.

    Raises:
        MalformedStringRegionError: If the document ends inside a multi-line string.

    Examples:
        count_bol_whitespace(split_lines("\\tx\\n  y\\n"))  # tabs=1, spaces=2
    """
    tally = WhitespaceTally()

    if not profile.string_aware:
        for line in lines:
            _count_leading(line.content, tally)
        return tally

    state = ScanState()
    for line_number, line in enumerate(lines, start=1):
        at_line_start = not state.in_multi_line_string
        carried_over = state.in_multi_line_string

        for token in scan_line(line.content, profile, state, line_number):
            if token.closes_multi_line:
                # TODO: decide whether whitespace after a closing quote is really
                # indentation; tabify never rewrites it, so such files stay mixed.
                at_line_start = carried_over
                carried_over = False
            elif not at_line_start:
                continue
            elif token.text == " ":
                tally.space_count += 1
            elif token.text == "\t":
                tally.tab_count += 1
            else:
                at_line_start = False

    ensure_closed(state, profile)
    return tally
