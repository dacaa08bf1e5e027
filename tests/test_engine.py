import pytest

from spacer.engine import analyze, check_output_target, convert, parse_target, tally
from spacer.exceptions import InvalidConfigurationError, MalformedStringRegionError
from spacer.models import WhitespaceKind
from spacer.profiles import CSHARP_PROFILE, PLAIN_PROFILE


def test_end_to_end_convert_to_spaces():
    result = convert("\t\tfoo\n    bar\n", WhitespaceKind.SPACES, tab_size=4)

    assert result.content == " " * 8 + "foo\n" + " " * 4 + "bar\n"
    assert result.before_kind is WhitespaceKind.MIXED
    assert result.after_kind is WhitespaceKind.SPACES
    assert (result.before.tab_count, result.before.space_count) == (2, 4)
    assert (result.after.tab_count, result.after.space_count) == (0, 12)


def test_convert_to_tabs_expands_then_compacts():
    result = convert("\t\tfoo\n  \t  bar\n", WhitespaceKind.TABS, tab_size=4)

    assert result.content == "\t\tfoo\n\t  bar\n"
    assert result.after_kind is WhitespaceKind.MIXED


def test_convert_to_tabs_with_round_down_is_pure_tabs():
    result = convert("\t\tfoo\n  \t  bar\n", WhitespaceKind.TABS, tab_size=4, round_down=True)

    assert result.content == "\t\tfoo\n\tbar\n"
    assert result.after_kind is WhitespaceKind.TABS


def test_convert_expands_tabs_after_indent_when_tabifying():
    result = convert("\tx\ty\n", WhitespaceKind.TABS, tab_size=4)

    assert result.content == "\tx" + " " * 3 + "y\n"


def test_convert_preserves_terminators():
    result = convert("\tfoo\r\n\tbar\r", WhitespaceKind.SPACES, tab_size=2)

    assert result.content == "  foo\r\n  bar\r"


def test_convert_rejects_mixed_target():
    with pytest.raises(InvalidConfigurationError):
        convert("\tx\n", WhitespaceKind.MIXED)


def test_convert_rejects_non_positive_tab_size():
    with pytest.raises(InvalidConfigurationError):
        convert("\tx\n", WhitespaceKind.SPACES, tab_size=0)


def test_spaces_conversion_is_idempotent():
    content = "\tif x:\n\t\treturn\t1\n  \tpass\n"

    once = convert(content, WhitespaceKind.SPACES).content
    twice = convert(once, WhitespaceKind.SPACES).content

    assert twice == once


def test_tabs_round_down_conversion_is_idempotent():
    content = " " * 9 + "x\n  \ty\n" + " " * 3 + "z\n"

    once = convert(content, WhitespaceKind.TABS, round_down=True)
    twice = convert(once.content, WhitespaceKind.TABS, round_down=True)

    assert twice.content == once.content
    assert once.after_kind is WhitespaceKind.TABS


def test_tabs_without_round_down_keeps_partial_stop_and_stays_mixed():
    content = " " * 9 + "x\n"

    once = convert(content, WhitespaceKind.TABS, tab_size=4)
    twice = convert(once.content, WhitespaceKind.TABS, tab_size=4)

    assert once.content == "\t\t x\n"
    assert twice.content == once.content
    assert once.after_kind is WhitespaceKind.MIXED
    assert twice.before_kind is WhitespaceKind.MIXED
    assert twice.after_kind is WhitespaceKind.MIXED


def test_verbatim_string_differential():
    content = 'var sql = @"\n\tSELECT 1\n";\n'

    aware = convert(content, WhitespaceKind.SPACES, profile=CSHARP_PROFILE)
    plain = convert(content, WhitespaceKind.SPACES, profile=PLAIN_PROFILE)

    assert aware.content == content
    assert plain.content == 'var sql = @"\n    SELECT 1\n";\n'


def test_analyze_classifications():
    assert analyze("") is WhitespaceKind.SPACES
    assert analyze("no indent\n") is WhitespaceKind.SPACES
    assert analyze("\tx\n") is WhitespaceKind.TABS
    assert analyze("  x\n") is WhitespaceKind.SPACES
    assert analyze("\tx\n  y\n") is WhitespaceKind.MIXED


def test_tally_reports_counts():
    counts = tally("\t\ta\n   b\n")

    assert counts.tab_count == 2
    assert counts.space_count == 3


def test_analyze_rejects_unterminated_verbatim_string():
    with pytest.raises(MalformedStringRegionError):
        analyze('s = @"\nnever closed\n', CSHARP_PROFILE)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("none", None),
        ("spaces", WhitespaceKind.SPACES),
        ("S", WhitespaceKind.SPACES),
        ("Tabs", WhitespaceKind.TABS),
        ("t", WhitespaceKind.TABS),
        (WhitespaceKind.TABS, WhitespaceKind.TABS),
    ],
)
def test_parse_target(value, expected):
    assert parse_target(value) is expected


@pytest.mark.parametrize("value", ["mixed", "M", "bogus", WhitespaceKind.MIXED])
def test_parse_target_rejects_invalid_modes(value):
    with pytest.raises(InvalidConfigurationError):
        parse_target(value)


def test_check_output_target_requires_mode():
    with pytest.raises(InvalidConfigurationError) as error:
        check_output_target(None, "out.txt")

    assert "Must specify conversion mode with output file" in str(error.value)


def test_check_output_target_accepts_valid_combinations():
    check_output_target(None, None)
    check_output_target(WhitespaceKind.TABS, None)
    check_output_target(WhitespaceKind.SPACES, "out.txt")
