"""Extraction and restoration of literal regions (code blocks and code spans)."""

from __future__ import annotations

import re

from .constants import CODE_FENCE_PATTERN, INLINE_CODE_PATTERN, SENTINEL_RANGES
from .exceptions import PlaceholderSpaceExhaustedError
from .models import ExtractedDocument, LiteralKind, PlaceholderTable


def find_sentinel(text: str, exclude: str = "") -> str:
    """Pick a private-use character that does not occur in `text`.

    Args:
        text: Text the sentinel must be absent from.
        exclude: Additional characters that must not be returned.

    Returns:
        str: A single character usable as a token delimiter.

    Raises:
        PlaceholderSpaceExhaustedError: If every candidate occurs in `text`.

    Examples:
        find_sentinel("plain text")  # "\\ue000"
        find_sentinel("\\ue000")  # "\\ue001"
    """
    used = set(text)
    used.update(exclude)
    candidates = 0
    for code_points in SENTINEL_RANGES:
        for code_point in code_points:
            candidates += 1
            character = chr(code_point)
            if character not in used:
                return character
    raise PlaceholderSpaceExhaustedError(candidates)


def render_code_block(body: str, language: str | None = None) -> str:
    """Render a fenced code block body as a Jira ``{code}`` macro.

    Trailing whitespace is trimmed; everything else is kept verbatim.

    Examples:
        render_code_block("x = 1\\n", "python")  # "{code:python}\\nx = 1\\n{code}"
    """
    opening = f"{{code:{language}}}" if language else "{code}"
    return f"{opening}\n{body.rstrip()}\n{{code}}"


def render_inline_code(content: str) -> str:
    return f"{{{{{content}}}}}"


def extract_literals(text: str) -> ExtractedDocument:
    """Replace code blocks and inline code spans with placeholder tokens.

    Fenced blocks are extracted first; inline spans are then looked for in
    the remaining text only, so a fence's interior is never scanned for
    spans.

    Args:
        text: Raw Markdown text.

    Returns:
        ExtractedDocument: Text holding placeholder tokens plus the two
        placeholder tables. Both tables are empty, and the text is unchanged,
        when the input has no literals.

    Raises:
        PlaceholderSpaceExhaustedError: If no sentinel character is available.

    Examples:
        doc = extract_literals("Run `make` first")
        doc.inline_code.literals  # ["{{make}}"]
    """
    sentinel = find_sentinel(text)
    code_blocks = PlaceholderTable(LiteralKind.CODE_BLOCK, sentinel)
    inline_code = PlaceholderTable(LiteralKind.INLINE_CODE, sentinel)

    def _replace_block(match: re.Match[str]) -> str:
        return code_blocks.add(render_code_block(match.group("body"), match.group("lang")))

    def _replace_span(match: re.Match[str]) -> str:
        return inline_code.add(render_inline_code(match.group(1)))

    text = CODE_FENCE_PATTERN.sub(_replace_block, text)
    text = INLINE_CODE_PATTERN.sub(_replace_span, text)

    return ExtractedDocument(text=text, code_blocks=code_blocks, inline_code=inline_code)


def _restore_table(text: str, table: PlaceholderTable) -> str:
    if not table:
        return text
    # A single substitution pass; restored literals are never re-scanned.
    return table.pattern.sub(lambda match: table.literals[int(match.group(1))], text)


def restore_literals(text: str, document: ExtractedDocument) -> str:
    """Swap placeholder tokens back for their recorded literal text.

    Inline code tokens are restored before code block tokens.

    Args:
        text: Fully rewritten text still holding placeholder tokens.
        document: Extraction result whose tables own the tokens.

    Returns:
        str: Text with every placeholder resolved.
    """
    text = _restore_table(text, document.inline_code)
    return _restore_table(text, document.code_blocks)
