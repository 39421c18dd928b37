"""Data models for md-to-jira."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class LiteralKind(Enum):
    """Classes of literal regions protected from rewriting.

    The value is the tag embedded in placeholder tokens.

    Attributes:
        CODE_BLOCK: Fenced code block rendered as a ``{code}`` macro.
        INLINE_CODE: Inline code span rendered as ``{{monospace}}``.
    """

    CODE_BLOCK = "B"
    INLINE_CODE = "I"


@dataclass
class PlaceholderTable:
    """Side table mapping placeholder tokens to rendered literal text.

    Tokens have the form ``<sentinel><kind><index><sentinel>``. The sentinel
    is chosen per document so that it never occurs in the input, which keeps
    tokens from colliding with document text.

    Attributes:
        kind: Literal class stored in this table.
        sentinel: Single private-use character that brackets each token.
        literals: Rendered literal text, indexed by insertion order.
    """

    kind: LiteralKind
    sentinel: str
    literals: list[str] = field(default_factory=list)

    def add(self, literal: str) -> str:
        """Record `literal` and return the token that stands in for it."""
        self.literals.append(literal)
        return self.token(len(self.literals) - 1)

    def token(self, index: int) -> str:
        return f"{self.sentinel}{self.kind.value}{index}{self.sentinel}"

    @property
    def pattern(self) -> re.Pattern[str]:
        sentinel = re.escape(self.sentinel)
        return re.compile(rf"{sentinel}{self.kind.value}(\d+){sentinel}")

    def __len__(self) -> int:
        return len(self.literals)


@dataclass
class ExtractedDocument:
    """Text with its literal regions swapped out for placeholder tokens.

    Attributes:
        text: Document text containing placeholder tokens.
        code_blocks: Table of fenced code block literals.
        inline_code: Table of inline code span literals.
    """

    text: str
    code_blocks: PlaceholderTable
    inline_code: PlaceholderTable


@dataclass(frozen=True)
class Stage:
    """A named `str -> str` rewrite step of the conversion pipeline.

    Attributes:
        name: Short identifier used in logs and tests.
        transform: Pure function applied to the whole document text.
    """

    name: str
    transform: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.transform(text)
