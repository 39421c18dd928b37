"""Line-oriented rewrites: headings, blockquotes, rules and lists."""

from __future__ import annotations

from .config import JiraConfig
from .constants import (
    BLOCKQUOTE_PATTERN,
    HEADING_PATTERN,
    HORIZONTAL_RULE,
    HORIZONTAL_RULE_PATTERN,
    LIST_ITEM_PATTERN,
    TAB_WIDTH,
)


def leading_whitespace_columns(text: str) -> int:
    """Compute the column width of leading whitespace.

    Tabs advance to the next multiple of four columns to match Markdown
    indentation rules.

    Args:
        text: Text whose leading whitespace should be measured.

    Returns:
        int: Number of columns occupied by the leading whitespace.

    Examples:
        leading_whitespace_columns("    text")  # 4
        leading_whitespace_columns("\\ttext")  # 4
    """
    columns = 0
    for character in text:
        if character == " ":
            columns += 1
            continue
        if character == "\t":
            columns += TAB_WIDTH - (columns % TAB_WIDTH)
            continue
        break
    return columns


def list_level(indent: str, config: JiraConfig | None = None) -> int:
    """Return the nesting level for a list item with the given indentation.

    The level is ``columns // list_indent_width + 1``, clamped to
    ``max_list_depth``.

    Examples:
        list_level("")  # 1
        list_level("  ")  # 2
        list_level(" " * 20)  # 4
    """
    config = config or JiraConfig()
    level = leading_whitespace_columns(indent) // config.list_indent_width + 1
    return min(level, config.max_list_depth)


def rewrite_heading(line: str) -> str | None:
    match = HEADING_PATTERN.match(line)
    if not match:
        return None
    return f"h{len(match.group(1))}. {match.group(2)}"


def rewrite_blockquote(line: str) -> str | None:
    match = BLOCKQUOTE_PATTERN.match(line)
    if not match:
        return None
    return f"bq. {match.group(1)}"


def rewrite_horizontal_rule(line: str) -> str | None:
    if not HORIZONTAL_RULE_PATTERN.match(line):
        return None
    # Keep a CRLF line ending intact.
    return HORIZONTAL_RULE + "\r" if line.endswith("\r") else HORIZONTAL_RULE


def rewrite_list_item(line: str, config: JiraConfig | None = None) -> str | None:
    """Rewrite a bullet or numbered list item into Jira list syntax.

    Unordered markers (``-``, ``*``, ``+``) become a run of ``*``; numbered
    markers become a run of ``#``. Each line is leveled on its own.

    Examples:
        rewrite_list_item("  - nested")  # "** nested"
        rewrite_list_item("3. third")  # "# third"
    """
    match = LIST_ITEM_PATTERN.match(line)
    if not match:
        return None

    sigil = "*" if match.group("marker") in ("-", "*", "+") else "#"
    level = list_level(match.group("indent"), config)
    return f"{sigil * level} {match.group('content')}"


def rewrite_line(line: str, config: JiraConfig | None = None) -> str:
    """Apply the first matching block rule to a single line.

    Rules are tried in order: heading, blockquote, horizontal rule, list
    item. The rule must come before the list item so ``- - -`` is a rule.
    Lines matching no rule are returned unchanged.
    """
    for rule in (rewrite_heading, rewrite_blockquote, rewrite_horizontal_rule):
        rewritten = rule(line)
        if rewritten is not None:
            return rewritten

    rewritten = rewrite_list_item(line, config)
    return line if rewritten is None else rewritten


def rewrite_blocks(text: str, config: JiraConfig | None = None) -> str:
    """Rewrite block-level Markdown constructs line by line.

    Args:
        text: Document text with literal regions already extracted.
        config: Configuration controlling list nesting. Defaults to a new
            `JiraConfig` when omitted.

    Returns:
        str: Text with headings, blockquotes, horizontal rules and list
        markers in Jira form.

    Examples:
        rewrite_blocks("# Title\\n- item")  # "h1. Title\\n* item"
    """
    config = config or JiraConfig()
    return "\n".join(rewrite_line(line, config) for line in text.split("\n"))
