"""Package-specific exception types."""

from __future__ import annotations


class SpacerError(ValueError):
    """Base class for whitespace conversion errors.

    Represents errors that abort the analysis or conversion of one document.
    """


class InvalidConfigurationError(SpacerError):
    """Raised when conversion settings are inconsistent or out of range.

    Examples:
        raise InvalidConfigurationError("`tab_size` must be a positive integer")
    """


class InputNotFoundError(SpacerError):
    """Raised when the input file does not exist.

    Args:
        path: Path that could not be found.
    """

    def __init__(self, path: object):
        self.path = path
        super().__init__(f"The file '{path}' does not exist")


class MalformedStringRegionError(SpacerError):
    """Raised when a document ends inside an unterminated multi-line string.

    Args:
        line_number: One-based line where the open string began.
        profile_name: Name of the language profile used for scanning.
    """

    def __init__(self, line_number: int, profile_name: str):
        self.line_number = line_number
        self.profile_name = profile_name
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Unterminated multi-line string starting at line {self.line_number} "
            f"({self.profile_name})"
        )
