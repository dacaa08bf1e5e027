"""Analysis and conversion entry points."""

from __future__ import annotations

import logging

from .classifier import count_bol_whitespace
from .config import validate_tab_size
from .constants import DEFAULT_TAB_SIZE, MODE_NAMES
from .exceptions import InvalidConfigurationError
from .models import ConversionResult, WhitespaceKind, WhitespaceTally
from .profiles import PLAIN_PROFILE, LanguageProfile
from .splitter import parse_document
from .tabify import tabify
from .untabify import untabify

logger = logging.getLogger(__name__)

CONVERSION_TARGETS = (WhitespaceKind.SPACES, WhitespaceKind.TABS)


def parse_target(value: str | WhitespaceKind | None) -> WhitespaceKind | None:
    """Map a conversion mode name to its target kind.

    Args:
        value: ``"spaces"``/``"s"``, ``"tabs"``/``"t"`` (any case), a
            `WhitespaceKind`, or ``None``/``"none"`` for analysis only.

    Returns:
        WhitespaceKind | None: Conversion target, or None when no conversion is
            requested.

    Raises:
        InvalidConfigurationError: If the name is unknown or names the mixed
            classification.

    Examples:
        parse_target("T")  # WhitespaceKind.TABS
        parse_target("none")  # None
    """
    if value is None or isinstance(value, WhitespaceKind):
        kind = value
    else:
        key = value.strip().lower()
        if key not in MODE_NAMES:
            raise InvalidConfigurationError(f"Unknown conversion mode: {value!r}")
        name = MODE_NAMES[key]
        kind = None if name is None else WhitespaceKind(name)

    if kind is not None and kind not in CONVERSION_TARGETS:
        raise InvalidConfigurationError(
            f"Cannot convert to {kind.value}; choose spaces or tabs"
        )
    return kind


def tally(content: str, profile: LanguageProfile = PLAIN_PROFILE) -> WhitespaceTally:
    """Count beginning-of-line tabs and spaces in `content`."""
    document = parse_document(content)
    return count_bol_whitespace(document.lines, profile)


def analyze(content: str, profile: LanguageProfile = PLAIN_PROFILE) -> WhitespaceKind:
    """Classify the indentation of `content` as spaces, tabs, or mixed.

    Raises:
        MalformedStringRegionError: If a string-aware profile finds an
            unterminated multi-line string.
    """
    return tally(content, profile).kind


def convert(
    content: str,
    target: WhitespaceKind,
    tab_size: int = DEFAULT_TAB_SIZE,
    round_down: bool = False,
    profile: LanguageProfile = PLAIN_PROFILE,
) -> ConversionResult:
    """Rewrite the indentation of `content` to spaces or tabs.

    Converting to spaces expands tabs. Converting to tabs first expands tabs so
    every line has a consistent column basis, then compacts leading spaces.

    Args:
        content: Complete document text.
        target: `WhitespaceKind.SPACES` or `WhitespaceKind.TABS`.
        tab_size: Columns between tab stops.
        round_down: When converting to tabs, drop leading spaces that do not
            fill a whole tab stop.
        profile: Language conventions to apply.

    Returns:
        ConversionResult: Converted text with tallies before and after.

    Raises:
        InvalidConfigurationError: If `tab_size` is not positive or `target` is
            not spaces or tabs.
        MalformedStringRegionError: If a string-aware profile finds an
            unterminated multi-line string.

    Examples:
        convert("\\t\\tfoo\\n    bar\\n", WhitespaceKind.SPACES).content
        # "        foo\\n    bar\\n"
    """
    validate_tab_size(tab_size)
    if target not in CONVERSION_TARGETS:
        raise InvalidConfigurationError(
            f"Conversion target must be spaces or tabs, got {target!r}"
        )

    document = parse_document(content)
    before = count_bol_whitespace(document.lines, profile)
    logger.debug(
        "Before: %d tabs, %d spaces (%s, profile %s)",
        before.tab_count,
        before.space_count,
        before.kind.value,
        profile.name,
    )

    document.lines = untabify(document.lines, tab_size, profile)
    if target is WhitespaceKind.TABS:
        document.lines = tabify(document.lines, tab_size, round_down, profile)

    after = count_bol_whitespace(document.lines, profile)
    logger.debug(
        "After: %d tabs, %d spaces (%s)", after.tab_count, after.space_count, after.kind.value
    )

    return ConversionResult(content=document.render(), before=before, after=after)


def check_output_target(target: WhitespaceKind | None, output: object | None) -> None:
    """Reject an output destination when no conversion was requested.

    Raises:
        InvalidConfigurationError: If `output` is set while `target` is None.
    """
    if output is not None and target is None:
        raise InvalidConfigurationError("Must specify conversion mode with output file")
