"""Markdown table detection and rewriting."""

from __future__ import annotations

from .constants import TABLE_PIPE_PATTERN, TABLE_SEPARATOR_PATTERN


def is_delimited_row(line: str) -> bool:
    """Return True when `line` starts and ends with a pipe, ignoring outer whitespace."""
    stripped = line.strip()
    return len(stripped) >= 2 and stripped.startswith("|") and stripped.endswith("|")


def is_separator_row(line: str) -> bool:
    return TABLE_SEPARATOR_PATTERN.match(line) is not None


def split_cells(line: str) -> list[str]:
    r"""Split a delimited row into trimmed cell texts.

    Escaped pipes (``\|``) and the pipes inside Jira links (``[text|url]``)
    and images (``!url|alt=text!``) stay inside their cell. The empty strings
    produced by the outer delimiters are dropped.

    Examples:
        split_cells("| A | B |")  # ["A", "B"]
        split_cells(r"| a \| b | c |")  # [r"a \| b", "c"]
        split_cells("| [docs|https://x.io] | c |")  # ["[docs|https://x.io]", "c"]
    """
    stripped = line.strip()
    parts = []
    start = 0
    for match in TABLE_PIPE_PATTERN.finditer(stripped):
        if match.group(1) is None:
            continue
        parts.append(stripped[start : match.start()])
        start = match.end()
    parts.append(stripped[start:])
    return [cell.strip() for cell in parts[1:-1]]


def _format_row(cells: list[str], delimiter: str) -> str:
    # Empty cells would merge two delimiters into a header sigil.
    cells = [cell or " " for cell in cells]
    return delimiter + delimiter.join(cells) + delimiter


def format_header_row(cells: list[str]) -> str:
    return _format_row(cells, "||")


def format_data_row(cells: list[str]) -> str:
    return _format_row(cells, "|")


def rewrite_tables(text: str) -> str:
    """Rewrite Markdown tables into Jira table markup.

    Scans the lines with a forward index. A delimited row followed by a
    separator row starts a table: the header becomes ``||c1||c2||``, the
    separator is dropped, and every following delimited row becomes
    ``|c1|c2|``. The first row that is not delimited ends the table. All
    other lines pass through unchanged.

    Args:
        text: Document text after block and inline rewriting.

    Returns:
        str: Text with tables in Jira form.

    Examples:
        rewrite_tables("| H1 | H2 |\\n|---|---|\\n| A | B |")  # "||H1||H2||\\n|A|B|"
    """
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if is_delimited_row(line) and i + 1 < len(lines) and is_separator_row(lines[i + 1]):
            result.append(format_header_row(split_cells(line)))

            # Skip the header and separator rows
            i += 2

            while i < len(lines) and is_delimited_row(lines[i]):
                result.append(format_data_row(split_cells(lines[i])))
                i += 1
            continue

        result.append(line)
        i += 1

    return "\n".join(result)
