"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_LIST_INDENT_WIDTH, DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LIST_DEPTH

TOOL_NAME = "md-to-jira"


@dataclass
class JiraConfig:
    """Configuration for converting Markdown to Jira wiki markup.

    Attributes:
        max_list_depth: Deepest list nesting level emitted; deeper
            indentation is clamped to this level.
        list_indent_width: Number of leading columns per list nesting level.
        max_file_size: Maximum file size in bytes that will be processed.

    Examples:
        JiraConfig(max_list_depth=3, list_indent_width=4)
    """

    # Lists
    max_list_depth: int = DEFAULT_MAX_LIST_DEPTH
    list_indent_width: int = DEFAULT_LIST_INDENT_WIDTH

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_list_depth` must be a positive integer")
    """


def load_config(search_path: Path) -> JiraConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.md-to-jira]`` table from `pyproject.toml` and the
    ``[md-to-jira]`` or ``[tool.md-to-jira]`` table from `.md-to-jira.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        JiraConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", TOOL_NAME)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{TOOL_NAME}.toml",
            table_paths=[(TOOL_NAME,), ("tool", TOOL_NAME)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return JiraConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> JiraConfig | None:
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
) -> JiraConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys use dashes; accept the underscore spelling as well.
    options = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return JiraConfig(**options)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: JiraConfig) -> None:
    """Validate a `JiraConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a value is not an integer or is not positive.

    Examples:
        validate_config(JiraConfig(max_list_depth=6))
    """
    values = {
        "max_list_depth": config.max_list_depth,
        "list_indent_width": config.list_indent_width,
        "max_file_size": config.max_file_size,
    }
    _ensure_integers(values)
    _ensure_positive(values)


def apply_overrides(config: JiraConfig, **overrides: object) -> JiraConfig:
    """Apply override values to a `JiraConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        JiraConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `JiraConfig`.

    Examples:
        updated = apply_overrides(config, max_list_depth=2)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> JiraConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        JiraConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), list_indent_width=4)
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
