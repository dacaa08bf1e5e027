"""Filesystem helpers for spacer.

Paths are resolved up front, so symlinked inputs and directories are followed
and every later read, stat and write works on the real file.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, MAX_FILE_SIZE_ENV_VAR
from .exceptions import InputNotFoundError

logger = logging.getLogger(__name__)


def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError as error:
        raise ValueError(f"Invalid value for {name}: {raw} (expected positive integer)") from error

    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}.")
    return value


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the size limit in bytes, preferring ``SPACER_MAX_FILE_SIZE``.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["SPACER_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    return _positive_int_from_env(MAX_FILE_SIZE_ENV_VAR, default)


def normalize_filepath(raw_path: str) -> Path:
    """Resolve the input file path, following symlinks.

    Args:
        raw_path: User-supplied path (absolute or relative).

    Returns:
        Path: Absolute path of the real input file.

    Raises:
        InputNotFoundError: If the path (or a link target) does not exist.
        ValueError: If the path cannot be resolved or is not a regular file.

    Examples:
        normalize_filepath("src/Program.cs")
    """
    path = Path(raw_path).expanduser()

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise InputNotFoundError(path) from error
    except (OSError, RuntimeError) as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    return resolved


def normalize_output_path(raw_path: str) -> Path:
    """Resolve the output path; the file itself may not exist yet.

    A symlinked output resolves to its target, so the atomic replace rewrites
    the linked file rather than the link.

    Raises:
        ValueError: If the directory does not exist or the path names something
            other than a regular file.
    """
    resolved = Path(raw_path).expanduser().resolve()

    if not resolved.parent.is_dir():
        raise ValueError(f"Output directory {resolved.parent} does not exist.")
    if resolved.exists() and not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Stat a regular file.

    Raises:
        IOError: If the path is inaccessible or not a regular file.
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    if stat_result.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")


def _fingerprint(stat_result: os.stat_result) -> tuple:
    return (
        getattr(stat_result, "st_ino", None),
        getattr(stat_result, "st_dev", None),
        stat_result.st_size,
        stat_result.st_mtime_ns,
    )


def ensure_file_unchanged(
    expected_stat: os.stat_result, current_stat: os.stat_result, filepath: Path
):
    """Refuse to continue when a file was replaced or modified since `expected_stat`.

    Raises:
        IOError: If inode, device, size, or modification time differ.
    """
    if _fingerprint(expected_stat) != _fingerprint(current_stat):
        raise IOError(f"{filepath} changed during processing; refusing to overwrite.")


def safe_read(filepath: Path) -> TextIO:
    """Open `filepath` as UTF-8 with newline translation disabled.

    ``\\r\\n`` and ``\\r`` terminators reach the line splitter unchanged.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("Program.cs")) as handle:
            content = handle.read()
    """
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except (FileNotFoundError, PermissionError, IsADirectoryError, NotADirectoryError) as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error


def _copy_permissions(
    temp_name: str,
    source_stat: os.stat_result,
    filepath: Path,
    keep_owner: bool,
    warn: Callable[[str], None] | None,
):
    os.chmod(temp_name, stat.S_IMODE(source_stat.st_mode))
    if not keep_owner or not hasattr(os, "chown"):
        return

    uid = getattr(source_stat, "st_uid", None)
    gid = getattr(source_stat, "st_gid", None)
    if uid is None or gid is None:
        return
    try:
        os.chown(temp_name, uid, gid)
    except PermissionError:
        if warn is not None:
            warn(
                f"Warning: Could not preserve file ownership for {filepath.name} "
                "(requires elevated privileges)"
            )


def write_output(
    filepath: Path,
    content: str,
    expected_stat: os.stat_result | None = None,
    template_stat: os.stat_result | None = None,
    warn: Callable[[str], None] | None = None,
):
    """Atomically write converted content to `filepath`.

    When the target already exists its permissions (and, where allowed, its
    ownership) are carried over to the new file; otherwise they are taken
    from `template_stat`.

    Args:
        filepath: Destination path, already resolved.
        content: Converted document text, written without newline translation.
        expected_stat: Stat of the target captured before conversion. When given,
            the write is refused if the target changed in the meantime.
        template_stat: Stat whose permissions a newly created target receives.
        warn: Optional callback for emitting non-fatal warnings.

    Raises:
        IOError: If the target changed during processing or cannot be replaced.

    Examples:
        write_output(Path("Program.cs"), result.content, expected_stat=initial_stat)
    """
    current_stat: os.stat_result | None = None
    if expected_stat is not None or filepath.exists():
        current_stat = collect_file_stat(filepath)
    if expected_stat is not None:
        ensure_file_unchanged(expected_stat, current_stat, filepath)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", newline="", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

            if current_stat is not None:
                _copy_permissions(tmp_file.name, current_stat, filepath, True, warn)
            elif template_stat is not None:
                _copy_permissions(tmp_file.name, template_stat, filepath, False, warn)

        os.replace(temp_path, filepath)
        logger.debug("Wrote %d characters to %s", len(content), filepath)
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
