"""Token model: lexical units produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenCategory(Enum):
    """Coarse syntactic class of a token.

    Classification is purely lexical: property names, selector names and
    property values all share the VALUE category.
    """

    BLOCK_START = "BLOCK_START"
    BLOCK_END = "BLOCK_END"
    STYLE_SEPARATOR = "STYLE_SEPARATOR"
    STATEMENT_END = "STATEMENT_END"
    SELECTOR = "SELECTOR"  # "." or "#" prefix
    VALUE = "VALUE"


@dataclass(frozen=True)
class Token:
    """A single classified token with its 1-based source line."""

    text: str
    category: TokenCategory
    line: int
