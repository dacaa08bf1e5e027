"""Constants used across the spacer package."""

from __future__ import annotations

DEFAULT_TAB_SIZE = 4
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_STRING_AWARE_EXTENSIONS = (".cs",)

MAX_FILE_SIZE_ENV_VAR = "SPACER_MAX_FILE_SIZE"

# Accepted spellings of the conversion mode, including the short aliases.
MODE_NAMES = {
    "none": None,
    "spaces": "spaces",
    "s": "spaces",
    "tabs": "tabs",
    "t": "tabs",
    "mixed": "mixed",
    "m": "mixed",
}
