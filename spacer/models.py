"""Data models for spacer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class WhitespaceKind(Enum):
    """Beginning-of-line whitespace classification of a document.

    Attributes:
        SPACES: No leading tabs (also the classification of unindented text).
        TABS: Leading tabs only.
        MIXED: Both leading tabs and leading spaces.
    """

    SPACES = "spaces"
    TABS = "tabs"
    MIXED = "mixed"

    @classmethod
    def from_counts(cls, tab_count: int, space_count: int) -> WhitespaceKind:
        if tab_count > 0:
            return cls.MIXED if space_count > 0 else cls.TABS
        return cls.SPACES


@dataclass(frozen=True)
class Line:
    """One physical line of a document.

    Attributes:
        content: Characters of the line without its terminator.
        terminator: ``"\\r\\n"``, ``"\\n"``, ``"\\r"``, or ``""`` for a final
            unterminated line.
    """

    content: str
    terminator: str = ""

    @property
    def text(self) -> str:
        return self.content + self.terminator

    def with_content(self, content: str) -> Line:
        return replace(self, content=content)


@dataclass
class Document:
    """Original text of a file plus the working lines being transformed.

    Attributes:
        source: Text as it was read; never modified.
        lines: Working lines, replaced by each transform.
    """

    source: str
    lines: list[Line] = field(default_factory=list)

    def render(self) -> str:
        return "".join(line.text for line in self.lines)


@dataclass
class WhitespaceTally:
    """Beginning-of-line tab and space counts accumulated over a document."""

    tab_count: int = 0
    space_count: int = 0

    @property
    def kind(self) -> WhitespaceKind:
        return WhitespaceKind.from_counts(self.tab_count, self.space_count)


@dataclass
class ScanState:
    """String-literal state threaded through the scanner.

    Attributes:
        in_literal_string: Inside an ordinary quoted string. Reset at each line.
        in_multi_line_string: Inside a verbatim string; persists across lines.
        multi_line_start: One-based line where the open verbatim string began.
    """

    in_literal_string: bool = False
    in_multi_line_string: bool = False
    multi_line_start: int | None = None

    @property
    def in_string(self) -> bool:
        return self.in_literal_string or self.in_multi_line_string


@dataclass(frozen=True)
class ScanToken:
    """A piece of a line as classified by the scanner.

    Attributes:
        text: One character, or two for a verbatim prefix or an escaped quote pair.
        in_string: Whether the text belongs to a string literal, delimiters included.
        closes_multi_line: Whether this token ends a multi-line string.
    """

    text: str
    in_string: bool = False
    closes_multi_line: bool = False


@dataclass
class ConversionResult:
    """Converted text together with the tallies before and after conversion.

    Attributes:
        content: Converted document text.
        before: Tally of the original document.
        after: Tally of the converted document.
    """

    content: str
    before: WhitespaceTally
    after: WhitespaceTally

    @property
    def before_kind(self) -> WhitespaceKind:
        return self.before.kind

    @property
    def after_kind(self) -> WhitespaceKind:
        return self.after.kind
