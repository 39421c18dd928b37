"""Span-oriented rewrites: emphasis, strikethrough, images and links."""

from __future__ import annotations

import re

from .constants import (
    BOLD_ASTERISK_PATTERN,
    BOLD_ITALIC_PATTERN,
    BOLD_UNDERSCORE_PATTERN,
    IMAGE_PATTERN,
    ITALIC_PATTERN,
    LINK_PATTERN,
    LIST_SIGIL_PATTERN,
    STRIKETHROUGH_PATTERN,
)
from .literals import find_sentinel


def rewrite_emphasis(text: str, bold_marker: str) -> str:
    """Rewrite bold and italic spans.

    Bold spans are first wrapped in `bold_marker` so that their asterisks
    cannot be taken for italic delimiters; the marker becomes ``*`` once
    italics are done. `bold_marker` must not occur in `text`.

    Examples:
        rewrite_emphasis("**bold** and *italic*", "\\ue000")  # "*bold* and _italic_"
        rewrite_emphasis("a*b*c", "\\ue000")  # "a*b*c"
    """
    text = BOLD_ITALIC_PATTERN.sub(lambda m: f"{bold_marker}_{m.group(1)}_{bold_marker}", text)
    text = BOLD_ASTERISK_PATTERN.sub(lambda m: f"{bold_marker}{m.group(1)}{bold_marker}", text)
    text = BOLD_UNDERSCORE_PATTERN.sub(lambda m: f"{bold_marker}{m.group(1)}{bold_marker}", text)
    text = ITALIC_PATTERN.sub(r"_\1_", text)
    return text.replace(bold_marker, "*")


def rewrite_strikethrough(text: str) -> str:
    return STRIKETHROUGH_PATTERN.sub(r"-\1-", text)


def _render_image(match: re.Match[str]) -> str:
    alt, url = match.group(1), match.group(2).strip()
    if alt:
        return f"!{url}|alt={alt}!"
    return f"!{url}!"


def rewrite_images(text: str) -> str:
    return IMAGE_PATTERN.sub(_render_image, text)


def rewrite_links(text: str) -> str:
    # Images must already be rewritten or ``![alt](url)`` reads as a link.
    return LINK_PATTERN.sub(lambda m: f"[{m.group(1)}|{m.group(2).strip()}]", text)


def rewrite_spans(text: str, bold_marker: str) -> str:
    """Run every span rule over one line of text, in order."""
    text = rewrite_emphasis(text, bold_marker)
    text = rewrite_strikethrough(text)
    text = rewrite_images(text)
    return rewrite_links(text)


def rewrite_inline(text: str) -> str:
    """Rewrite span-level Markdown into Jira markup.

    Works line by line. A leading ``*`` list sigil left by the block rewriter
    is set aside first so it is never read as an emphasis delimiter.

    Args:
        text: Block-rewritten document text.

    Returns:
        str: Text with bold, italic, strikethrough, images and links in Jira
        form.

    Raises:
        PlaceholderSpaceExhaustedError: If no bold marker character is
            available.

    Examples:
        rewrite_inline("* **bold** item")  # "* *bold* item"
        rewrite_inline("[docs](https://example.com)")  # "[docs|https://example.com]"
    """
    bold_marker = find_sentinel(text)
    lines = []
    for line in text.split("\n"):
        sigil_match = LIST_SIGIL_PATTERN.match(line)
        if sigil_match:
            sigil, body = sigil_match.groups()
        else:
            sigil, body = "", line
        lines.append(sigil + rewrite_spans(body, bold_marker))
    return "\n".join(lines)
