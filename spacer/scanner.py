"""String-literal state machine shared by the classifier and the rewriters."""

from __future__ import annotations

from collections.abc import Iterator

from .exceptions import MalformedStringRegionError
from .models import ScanState, ScanToken
from .profiles import LanguageProfile


def is_escaped(text: str, pos: int, escape_char: str | None = "\\") -> bool:
    """Determine whether a character is escaped by preceding escape characters.

    Counts consecutive escape characters immediately before `pos`; an odd count
    marks the character as escaped.

    Args:
        text: Text containing the character.
        pos: Zero-based index of the character to inspect.
        escape_char: Escape character; None means nothing is ever escaped.

    Returns:
        bool: True when the character is escaped, otherwise False.

    Examples:
        is_escaped('"a\\\\"', 3)  # True, one backslash
        is_escaped('"a\\\\\\\\"', 4)  # False, two backslashes
    """
    if pos == 0 or not escape_char:
        return False

    escape_count = 0
    i = pos - 1
    while i >= 0 and text[i] == escape_char:
        escape_count += 1
        i -= 1

    return escape_count % 2 == 1


def _try_open_multi_line(
    state: ScanState, profile: LanguageProfile, text: str, pos: int, line_number: int
) -> bool:
    """Enter a multi-line string when the verbatim prefix starts at `pos`."""
    if state.in_string or not profile.verbatim_prefix:
        return False

    if not text.startswith(profile.verbatim_prefix, pos):
        return False

    state.in_multi_line_string = True
    state.multi_line_start = line_number
    return True


def _is_doubled_quote(profile: LanguageProfile, text: str, pos: int) -> bool:
    return text.startswith(profile.quote * 2, pos)


def _try_close_multi_line(state: ScanState, profile: LanguageProfile, text: str, pos: int) -> bool:
    """Leave a multi-line string at a quote that is not doubled."""
    if not state.in_multi_line_string:
        return False

    if text[pos] != profile.quote or _is_doubled_quote(profile, text, pos):
        return False

    state.in_multi_line_string = False
    state.multi_line_start = None
    return True


def _try_open_literal(state: ScanState, profile: LanguageProfile, text: str, pos: int) -> bool:
    if state.in_string or text[pos] != profile.quote:
        return False

    state.in_literal_string = True
    return True


def _try_close_literal(state: ScanState, profile: LanguageProfile, text: str, pos: int) -> bool:
    if not state.in_literal_string or text[pos] != profile.quote:
        return False

    if is_escaped(text, pos, profile.escape_char):
        return False

    state.in_literal_string = False
    return True


def _next_token(
    state: ScanState, profile: LanguageProfile, text: str, pos: int, line_number: int
) -> ScanToken:
    character = text[pos]

    if state.in_multi_line_string:
        if _is_doubled_quote(profile, text, pos):
            return ScanToken(profile.quote * 2, in_string=True)
        if _try_close_multi_line(state, profile, text, pos):
            return ScanToken(character, in_string=True, closes_multi_line=True)
        return ScanToken(character, in_string=True)

    if state.in_literal_string:
        _try_close_literal(state, profile, text, pos)
        return ScanToken(character, in_string=True)

    if _try_open_multi_line(state, profile, text, pos, line_number):
        return ScanToken(profile.verbatim_prefix, in_string=True)

    if _try_open_literal(state, profile, text, pos):
        return ScanToken(character, in_string=True)

    return ScanToken(character)


def scan_line(
    text: str, profile: LanguageProfile, state: ScanState, line_number: int = 1
) -> Iterator[ScanToken]:
    """Walk one line's content, yielding tokens tagged with their string region.

    The ordinary-literal flag is reset before scanning since quoted strings do
    not span lines; the multi-line flag carries over from the previous line.
    Under a profile without string awareness every character is a code token.

    Args:
        text: Line content, without its terminator.
        profile: Language conventions to apply.
        state: Scan state, updated in place as tokens are produced.
        line_number: One-based line number, recorded when a multi-line string opens.

    Yields:
        ScanToken: Consecutive pieces of `text`; joined, they reproduce it.

    Examples:
        [t.in_string for t in scan_line('a"b"', CSHARP_PROFILE, ScanState())]
        # [False, True, True, True]
    """
    state.in_literal_string = False

    if not profile.string_aware:
        for character in text:
            yield ScanToken(character)
        return

    pos = 0
    while pos < len(text):
        token = _next_token(state, profile, text, pos, line_number)
        yield token
        pos += len(token.text)


def ensure_closed(state: ScanState, profile: LanguageProfile) -> None:
    """Reject a document that ended inside a multi-line string.

    Raises:
        MalformedStringRegionError: If `state` is still inside a multi-line string.
    """
    if state.in_multi_line_string:
        raise MalformedStringRegionError(state.multi_line_start or 1, profile.name)
