"""
Converts Markdown to Jira wiki markup.
Reads a file, the --text option, or stdin, and writes the result to stdout or a file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .converter import convert
from .filesystem import get_max_file_size, read_text_file, resolve_source, write_output
from .logging_utils import configure_logging

__all__ = ["cli"]

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def read_source(filepath: Path, max_file_size: int) -> str:
    """Read a Markdown source file within the configured size limit.

    Raises:
        click.ClickException: If the file is inaccessible, too large, or not
            valid UTF-8.
    """
    try:
        return read_text_file(filepath, max_file_size)
    except UnicodeDecodeError as error:
        raise click.ClickException(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except IOError as error:
        raise click.ClickException(str(error)) from error


@click.command()
@click.version_option(package_name="md-to-jira")
@click.option("--text", "--markdown", "-t", "text", help="Markdown text to convert.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the Jira markup to this file instead of stdout.",
)
@click.option("--json", "as_json", is_flag=True, help='Emit {"jira": ...} instead of plain text.')
@click.option("--max-list-depth", type=int, help="Deepest list nesting level.")
@click.option("--list-indent-width", type=int, help="Columns of indentation per list level.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
@click.argument("filepath", required=False, type=click.Path(dir_okay=False, allow_dash=True))
def cli(
    filepath: str | None = None,
    text: str | None = None,
    output: str | None = None,
    as_json: bool = False,
    max_list_depth: int | None = None,
    list_indent_width: int | None = None,
    log_level: str = "WARNING",
):
    """
    Convert Markdown from FILEPATH, --text, or stdin to Jira wiki markup.

    Args:
        filepath: Markdown file to convert; ``-`` or no value reads stdin.
        text: Markdown text given directly; takes precedence over FILEPATH.
        output: Destination file; stdout when omitted.
        as_json: Wrap the result as ``{"jira": <markup>}``.
        max_list_depth: Override for the deepest list nesting level.
        list_indent_width: Override for the indentation columns per level.
        log_level: Logging level name.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.UsageError: If no Markdown text is supplied.
        click.ClickException: If reading or writing a file fails.

    Examples:
        md-to-jira README.md --json
        echo "**bold**" | md-to-jira
    """
    configure_logging(log_level)

    working_dir = Path.cwd().resolve()
    source_path: Path | None = None
    if text is None and filepath not in (None, "-"):
        try:
            source_path = resolve_source(filepath)
        except ValueError as error:
            raise click.BadParameter(str(error), param_hint="FILEPATH") from error

    search_path = source_path.parent if source_path is not None else working_dir
    try:
        config = build_config(
            search_path,
            max_list_depth=max_list_depth,
            list_indent_width=list_indent_width,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    if text is None:
        if source_path is not None:
            try:
                max_file_size = get_max_file_size(default=config.max_file_size)
            except ValueError as error:
                raise click.ClickException(str(error)) from error
            text = read_source(source_path, max_file_size)
        else:
            text = click.get_text_stream("stdin").read()

    if not text:
        raise click.UsageError("Markdown text is required")

    logger.info("Converting %d characters of Markdown", len(text))
    jira = convert(text, config)
    rendered = json.dumps({"jira": jira}) if as_json else jira

    if output is None:
        click.echo(rendered)
        return

    try:
        write_output(Path(output), rendered if rendered.endswith("\n") else rendered + "\n")
    except IOError as error:
        raise click.ClickException(str(error)) from error
    logger.info("Wrote Jira markup to %s", output)


if __name__ == "__main__":
    cli()
