"""Filesystem helpers for md-to-jira."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "MD_TO_JIRA_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MD_TO_JIRA_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def resolve_source(raw_path: str) -> Path:
    """Resolve a user-supplied input path to an absolute path.

    Any readable location is accepted; the regular-file and size checks
    happen when the file is read.

    Raises:
        ValueError: If the path does not exist or cannot be resolved.

    Examples:
        resolve_source("~/notes/release.md")
    """
    path = Path(raw_path).expanduser()
    try:
        return path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error


def regular_file_stat(filepath: Path) -> os.stat_result:
    """Stat `filepath` without following a final symlink.

    Raises:
        IOError: If the path cannot be stat'ed, or is anything but a regular file.
    """
    try:
        file_stat = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(file_stat.st_mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(file_stat.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    return file_stat


def read_text_file(filepath: Path, max_size: int) -> str:
    """Read a UTF-8 text file of at most `max_size` bytes.

    Args:
        filepath: Resolved path of the file to read.
        max_size: Largest accepted file size in bytes.

    Returns:
        str: The decoded file content.

    Raises:
        IOError: If the file is not a regular file, is too large, or cannot
            be opened.
        UnicodeDecodeError: If the content is not valid UTF-8.

    Examples:
        read_text_file(Path("README.md").resolve(), get_max_file_size())
    """
    if regular_file_stat(filepath).st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(filepath, encoding="UTF-8") as handle:
            return handle.read()
    except (FileNotFoundError, PermissionError, IsADirectoryError) as error:
        raise IOError(f"Error reading {filepath}: {error}") from error


def write_output(filepath: Path, content: str):
    """Write `content` to `filepath` atomically.

    The text goes to a temporary file in the target directory which then
    replaces `filepath`. Existing permissions are kept.

    Args:
        filepath: Destination path. Its parent directory must exist.
        content: Text to write.

    Raises:
        IOError: If the destination is a symlink or not a regular file, or the
            file cannot be written.

    Examples:
        write_output(Path("issue.jira"), "h1. Title\\n")
    """
    permissions: int | None = None
    if filepath.is_symlink() or filepath.exists():
        permissions = stat.S_IMODE(regular_file_stat(filepath).st_mode)

    try:
        fd, temp_name = tempfile.mkstemp(
            dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp"
        )
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="UTF-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if permissions is not None:
            os.chmod(temp_path, permissions)
        os.replace(temp_path, filepath)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise IOError(f"Error writing {filepath}: {error}") from error
