"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_STRING_AWARE_EXTENSIONS, DEFAULT_TAB_SIZE
from .exceptions import InvalidConfigurationError


@dataclass
class SpacerConfig:
    """Settings for analyzing and converting indentation.

    Attributes:
        tab_size: Columns between tab stops.
        round_down: When tabifying, drop leading spaces that do not fill a tab stop.
        string_aware_extensions: File suffixes scanned with the C# string-aware
            profile.
        max_file_size: Maximum file size in bytes that will be processed.

    Examples:
        SpacerConfig(tab_size=8, round_down=True)
    """

    tab_size: int = DEFAULT_TAB_SIZE
    round_down: bool = False
    string_aware_extensions: list[str] = field(
        default_factory=lambda: list(DEFAULT_STRING_AWARE_EXTENSIONS)
    )
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(InvalidConfigurationError):
    """Exception raised when configuration files or values are invalid.

    Examples:
        raise ConfigError("`tab_size` must be a positive integer")
    """


def validate_tab_size(tab_size: object) -> int:
    """Check that a tab size is a positive integer.

    Args:
        tab_size: Candidate tab size.

    Returns:
        int: The validated tab size.

    Raises:
        InvalidConfigurationError: If `tab_size` is not an integer or is not positive.
    """
    if isinstance(tab_size, bool) or not isinstance(tab_size, int):
        raise InvalidConfigurationError("`tab_size` must be an integer")
    if tab_size <= 0:
        raise InvalidConfigurationError("`tab_size` must be a positive integer")
    return tab_size


def load_config(search_path: Path) -> SpacerConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.spacer]`` table from `pyproject.toml` and the ``[spacer]`` or
    ``[tool.spacer]`` table from `.spacer.toml` when present. Returns default
    values when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        SpacerConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("src"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "spacer")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".spacer.toml",
            table_paths=[("spacer",), ("tool", "spacer")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return SpacerConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> SpacerConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> SpacerConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys use dashes; accept underscores too.
    normalized = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return SpacerConfig(**normalized)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: SpacerConfig) -> None:
    """Validate a `SpacerConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the tab size or size limit is not a positive integer, the
            round-down flag is not a boolean, or the extension list is malformed.

    Examples:
        validate_config(SpacerConfig(tab_size=2))
    """
    try:
        validate_tab_size(config.tab_size)
    except InvalidConfigurationError as error:
        raise ConfigError(str(error)) from error

    _ensure_integers({"max_file_size": config.max_file_size})
    _ensure_positive({"max_file_size": config.max_file_size})

    if not isinstance(config.round_down, bool):
        raise ConfigError("`round_down` must be a boolean")

    extensions = config.string_aware_extensions
    if not isinstance(extensions, (list, tuple)) or not all(
        isinstance(extension, str) and extension.startswith(".") for extension in extensions
    ):
        raise ConfigError("`string_aware_extensions` must be a list of suffixes such as \".cs\"")


def apply_overrides(config: SpacerConfig, **overrides: object) -> SpacerConfig:
    """Apply override values to a `SpacerConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        SpacerConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `SpacerConfig`.

    Examples:
        updated = apply_overrides(config, tab_size=8)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> SpacerConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        SpacerConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), tab_size=2)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
