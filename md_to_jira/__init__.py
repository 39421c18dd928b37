"""
md-to-jira: Markdown to Jira wiki markup converter.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-to-jira README.md
    echo "**bold**" | md-to-jira --json

Library Usage:
    from md_to_jira import convert

    jira = convert("Some **bold** text")
"""

from .blocks import rewrite_blocks
from .config import ConfigError, JiraConfig
from .converter import build_stages, convert, run_stages
from .exceptions import ConversionError, PlaceholderSpaceExhaustedError
from .inline import rewrite_inline
from .literals import extract_literals, restore_literals
from .models import ExtractedDocument, PlaceholderTable, Stage
from .tables import rewrite_tables

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert",
    "build_stages",
    "run_stages",
    # Stages
    "extract_literals",
    "rewrite_blocks",
    "rewrite_inline",
    "rewrite_tables",
    "restore_literals",
    # Data models
    "ExtractedDocument",
    "PlaceholderTable",
    "Stage",
    # Configuration
    "JiraConfig",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "PlaceholderSpaceExhaustedError",
    # Version
    "__version__",
]
