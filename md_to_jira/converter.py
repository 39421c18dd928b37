"""Markdown to Jira wiki markup conversion pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import partial

from .blocks import rewrite_blocks
from .config import ConfigError, JiraConfig, validate_config
from .exceptions import ConversionError
from .inline import rewrite_inline
from .literals import extract_literals, restore_literals
from .models import Stage
from .tables import rewrite_tables

logger = logging.getLogger(__name__)


def build_stages(config: JiraConfig | None = None) -> tuple[Stage, ...]:
    """Return the rewrite stages run between literal extraction and restoration.

    Order matters: list markers must be settled before emphasis is read, and
    tables are recognized last so their cells are already rewritten.

    Args:
        config: Configuration passed to stages that need it. Defaults to a
            new `JiraConfig` when omitted.

    Returns:
        tuple[Stage, ...]: Block, inline and table stages, in run order.
    """
    config = config or JiraConfig()
    return (
        Stage("blocks", partial(rewrite_blocks, config=config)),
        Stage("inline", rewrite_inline),
        Stage("tables", rewrite_tables),
    )


def run_stages(text: str, stages: Iterable[Stage]) -> str:
    for stage in stages:
        text = stage(text)
        logger.debug("Stage %s produced %d characters", stage.name, len(text))
    return text


def convert(markdown: object, config: JiraConfig | None = None) -> str:
    """Convert GitHub-flavored Markdown to Jira wiki markup.

    Code blocks and inline code spans are swapped for placeholder tokens
    before any rewrite runs and restored verbatim at the end. Never raises:
    input that is not a string, or is empty, yields ``""``, and text that
    matches no rule passes through unchanged.

    Args:
        markdown: The Markdown text to convert.
        config: Configuration controlling list nesting. Defaults to a new
            `JiraConfig` when omitted. An invalid configuration is logged and
            the input is returned unchanged.

    Returns:
        str: The converted Jira markup.

    Examples:
        convert("**bold** and *italic*")  # "*bold* and _italic_"
        convert("- item 1\\n  - nested item")  # "* item 1\\n** nested item"
        convert(None)  # ""
    """
    if not markdown or not isinstance(markdown, str):
        return ""

    try:
        if config is not None:
            validate_config(config)
        document = extract_literals(markdown)
        logger.debug(
            "Extracted %d code blocks and %d inline code spans",
            len(document.code_blocks),
            len(document.inline_code),
        )
        text = run_stages(document.text, build_stages(config))
        return restore_literals(text, document)
    except (ConversionError, ConfigError) as error:
        logger.warning("Returning input unchanged: %s", error)
        return markdown
