"""Language profiles controlling string-literal awareness."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_STRING_AWARE_EXTENSIONS


@dataclass(frozen=True)
class LanguageProfile:
    """String literal conventions of a source language.

    A profile without a `quote` disables string awareness: every character is
    treated as code.

    Attributes:
        name: Short name used in reports.
        verbatim_prefix: Marker opening a multi-line string (for example ``'@"'``).
            The string ends at a single `quote`; a doubled quote is an escaped quote.
        quote: Quote character delimiting ordinary string literals.
        escape_char: Character escaping a quote inside an ordinary literal.
        extensions: File suffixes this profile is normally used for.

    Examples:
        LanguageProfile("c#", verbatim_prefix='@"', quote='"', escape_char="\\\\")
    """

    name: str
    verbatim_prefix: str | None = None
    quote: str | None = None
    escape_char: str | None = None
    extensions: tuple[str, ...] = ()

    @property
    def string_aware(self) -> bool:
        return self.quote is not None


PLAIN_PROFILE = LanguageProfile("other")

CSHARP_PROFILE = LanguageProfile(
    "c#",
    verbatim_prefix='@"',
    quote='"',
    escape_char="\\",
    extensions=(".cs",),
)


def profile_for_path(
    path: str | Path, string_aware_extensions: Iterable[str] = DEFAULT_STRING_AWARE_EXTENSIONS
) -> LanguageProfile:
    """Choose a profile from a file's extension.

    Args:
        path: File being processed.
        string_aware_extensions: Suffixes that enable the C# string-aware profile.

    Returns:
        LanguageProfile: `CSHARP_PROFILE` for listed suffixes, otherwise
            `PLAIN_PROFILE`.

    Examples:
        profile_for_path("Program.cs")  # CSHARP_PROFILE
        profile_for_path("notes.txt")  # PLAIN_PROFILE
    """
    suffix = Path(path).suffix.lower()
    if suffix and suffix in {extension.lower() for extension in string_aware_extensions}:
        return CSHARP_PROFILE
    return PLAIN_PROFILE
