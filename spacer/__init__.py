"""
spacer: beginning-of-line tab/space reporter and fixer for text files.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    spacer Program.cs --mode tabs

Library Usage:
    from spacer import CSHARP_PROFILE, WhitespaceKind, analyze, convert

    kind = analyze(content, CSHARP_PROFILE)
    result = convert(content, WhitespaceKind.SPACES, tab_size=4, profile=CSHARP_PROFILE)
    new_text = result.content
"""

from .classifier import count_bol_whitespace
from .engine import analyze, convert, parse_target, tally
from .exceptions import (
    InputNotFoundError,
    InvalidConfigurationError,
    MalformedStringRegionError,
    SpacerError,
)
from .models import ConversionResult, Document, Line, ScanState, WhitespaceKind, WhitespaceTally
from .profiles import CSHARP_PROFILE, PLAIN_PROFILE, LanguageProfile, profile_for_path
from .splitter import join_lines, parse_document, split_lines
from .tabify import tabify
from .untabify import untabify

__version__ = "1.0.0"

__all__ = [
    # Core functionality
    "analyze",
    "convert",
    "tally",
    "parse_target",
    # Building blocks
    "split_lines",
    "join_lines",
    "parse_document",
    "count_bol_whitespace",
    "untabify",
    "tabify",
    # Profiles
    "LanguageProfile",
    "PLAIN_PROFILE",
    "CSHARP_PROFILE",
    "profile_for_path",
    # Data models
    "ConversionResult",
    "Document",
    "Line",
    "ScanState",
    "WhitespaceKind",
    "WhitespaceTally",
    # Exceptions
    "SpacerError",
    "InvalidConfigurationError",
    "InputNotFoundError",
    "MalformedStringRegionError",
    # Version
    "__version__",
]
