import pytest

from spacer.exceptions import MalformedStringRegionError
from spacer.models import ScanState
from spacer.profiles import CSHARP_PROFILE, PLAIN_PROFILE
from spacer.scanner import (
    _try_close_literal,
    _try_close_multi_line,
    _try_open_literal,
    _try_open_multi_line,
    ensure_closed,
    is_escaped,
    scan_line,
)


def _regions(text: str, state: ScanState | None = None, profile=CSHARP_PROFILE):
    state = state if state is not None else ScanState()
    return [(token.text, token.in_string) for token in scan_line(text, profile, state)]


def test_is_escaped_counts_backslashes():
    assert is_escaped('a\\"', 2) is True
    assert is_escaped('a\\\\"', 3) is False
    assert is_escaped('"', 0) is False
    assert is_escaped('a\\"', 2, escape_char=None) is False


def test_try_open_multi_line_records_start_line():
    state = ScanState()

    assert _try_open_multi_line(state, CSHARP_PROFILE, 'x = @"', 4, 7) is True
    assert state.in_multi_line_string is True
    assert state.multi_line_start == 7


def test_try_open_multi_line_ignored_inside_literal():
    state = ScanState(in_literal_string=True)

    assert _try_open_multi_line(state, CSHARP_PROFILE, '@"', 0, 1) is False
    assert state.in_multi_line_string is False


def test_try_open_multi_line_needs_prefix():
    state = ScanState()

    assert _try_open_multi_line(state, PLAIN_PROFILE, '@"', 0, 1) is False
    assert _try_open_multi_line(state, CSHARP_PROFILE, "@x", 0, 1) is False


def test_try_close_multi_line_skips_doubled_quote():
    state = ScanState(in_multi_line_string=True, multi_line_start=2)

    assert _try_close_multi_line(state, CSHARP_PROFILE, '""', 0) is False
    assert state.in_multi_line_string is True

    assert _try_close_multi_line(state, CSHARP_PROFILE, '";', 0) is True
    assert state.in_multi_line_string is False
    assert state.multi_line_start is None


def test_try_literal_transitions():
    state = ScanState()

    assert _try_open_literal(state, CSHARP_PROFILE, '"', 0) is True
    assert state.in_literal_string is True

    assert _try_close_literal(state, CSHARP_PROFILE, '"\\"', 2) is False
    assert state.in_literal_string is True

    assert _try_close_literal(state, CSHARP_PROFILE, '"a"', 2) is True
    assert state.in_literal_string is False


def test_plain_profile_never_enters_strings():
    state = ScanState()

    regions = _regions('@"a\tb"', state, PLAIN_PROFILE)

    assert all(not in_string for _, in_string in regions)
    assert len(regions) == 6
    assert state.in_multi_line_string is False


def test_tokens_reassemble_line():
    text = 'var s = @"a""b" + "c\\"d";'

    tokens = list(scan_line(text, CSHARP_PROFILE, ScanState()))

    assert "".join(token.text for token in tokens) == text


def test_literal_string_regions():
    assert _regions('f("a\tb");') == [
        ("f", False),
        ("(", False),
        ('"', True),
        ("a", True),
        ("\t", True),
        ("b", True),
        ('"', True),
        (")", False),
        (";", False),
    ]


def test_escaped_quote_does_not_close_literal():
    state = ScanState()

    regions = _regions('"a\\"b" c', state)

    assert regions[3] == ('"', True)
    assert regions[-2:] == [(" ", False), ("c", False)]
    assert state.in_literal_string is False


def test_escaped_backslash_closes_literal():
    regions = _regions('"a\\\\" b')

    assert regions[4] == ('"', True)
    assert regions[5] == (" ", False)


def test_verbatim_string_with_doubled_quote():
    state = ScanState()

    tokens = list(scan_line('@"a""b" c', CSHARP_PROFILE, state))

    assert [token.text for token in tokens] == ['@"', "a", '""', "b", '"', " ", "c"]
    assert [token.in_string for token in tokens] == [True, True, True, True, True, False, False]
    assert [token.closes_multi_line for token in tokens] == [
        False,
        False,
        False,
        False,
        True,
        False,
        False,
    ]
    assert state.in_multi_line_string is False


def test_multi_line_string_spans_lines():
    state = ScanState()

    list(scan_line('x = @"abc', CSHARP_PROFILE, state, 3))
    assert state.in_multi_line_string is True
    assert state.multi_line_start == 3

    regions = _regions('\tdef";\t', state)

    assert regions[0] == ("\t", True)
    assert regions[4] == ('"', True)
    assert regions[5:] == [(";", False), ("\t", False)]
    assert state.in_multi_line_string is False


def test_literal_string_resets_at_line_start():
    state = ScanState(in_literal_string=True)

    assert _regions("a", state) == [("a", False)]
    assert state.in_literal_string is False


def test_verbatim_prefix_inside_literal_is_text():
    state = ScanState()

    _regions('"@"', state)

    assert state.in_multi_line_string is False


def test_ensure_closed_reports_start_line():
    state = ScanState(in_multi_line_string=True, multi_line_start=5)

    with pytest.raises(MalformedStringRegionError) as error:
        ensure_closed(state, CSHARP_PROFILE)

    assert error.value.line_number == 5
    assert error.value.profile_name == "c#"
    assert "line 5" in str(error.value)


def test_ensure_closed_accepts_open_literal():
    ensure_closed(ScanState(in_literal_string=True), CSHARP_PROFILE)
