"""Constants used across the md-to-jira package."""

from __future__ import annotations

import re

# Limits and defaults
DEFAULT_MAX_LIST_DEPTH = 4
DEFAULT_LIST_INDENT_WIDTH = 2
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
TAB_WIDTH = 4

# Placeholder sentinels are taken from the Unicode private-use areas.
SENTINEL_RANGES = (
    range(0xE000, 0xF900),
    range(0xF0000, 0xFFFFE),
    range(0x100000, 0x10FFFE),
)

# Literals
# A closing fence uses the opening character and is at least as long.
CODE_FENCE_PATTERN = re.compile(
    r"^[ ]{0,3}(?P<fence>(?P<char>[`~])(?P=char){2,})[ \t]*(?P<lang>[\w+#.-]*)[^\n]*\n"
    r"(?P<body>.*?)"
    r"^[ ]{0,3}(?P=fence)(?P=char)*[ \t]*\r?$",
    re.MULTILINE | re.DOTALL,
)
INLINE_CODE_PATTERN = re.compile(r"`([^`\n]+)`")

# Block rules, matched one line at a time
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
BLOCKQUOTE_PATTERN = re.compile(r"^>[ \t]+(.+)$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}\s*$")
LIST_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d+\.)[ \t]+(?P<content>.+)$")
HORIZONTAL_RULE = "----"

# Inline rules
LIST_SIGIL_PATTERN = re.compile(r"^(\*+ )(.*)$")
BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*(?=\S)(.+?)(?<=\S)\*\*\*")
BOLD_ASTERISK_PATTERN = re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"(?<!\w)__(?=\S)(.+?)(?<=\S)__(?!\w)")
ITALIC_PATTERN = re.compile(r"(?<![*\w])\*(?![*\s])([^*\n]+?)(?<!\s)\*(?![*\w])")
STRIKETHROUGH_PATTERN = re.compile(r"~~(?=\S)(.+?)(?<=\S)~~")
IMAGE_PATTERN = re.compile(r"!\[([^\]\n]*)\]\(([^)\n]+)\)")
LINK_PATTERN = re.compile(r"\[([^\]\n]+)\]\(([^)\n]+)\)")

# Tables
TABLE_SEPARATOR_PATTERN = re.compile(r"^\s*\|(?=[^\n]*-)[\s:|-]*\|\s*$")
# Jira links and images carry their own pipes; only the last group is a cell boundary.
TABLE_PIPE_PATTERN = re.compile(
    r"\[[^\[\]|\n]+\|[^\[\]\s|]+\]"
    r"|![^\s!|]+\|alt=[^!\n|]*!"
    r"|\\\|"
    r"|(\|)"
)
