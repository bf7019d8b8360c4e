"""Map a token's literal text to its syntactic category."""

from __future__ import annotations

from cssmap.model.token import TokenCategory

__all__ = ["classify", "PUNCTUATION"]

PUNCTUATION: dict[str, TokenCategory] = {
    "{": TokenCategory.BLOCK_START,
    "}": TokenCategory.BLOCK_END,
    ":": TokenCategory.STYLE_SEPARATOR,
    ";": TokenCategory.STATEMENT_END,
    ".": TokenCategory.SELECTOR,
    "#": TokenCategory.SELECTOR,
}


def classify(text: str) -> TokenCategory:
    """Return the category for *text*; anything that is not punctuation is a VALUE."""
    return PUNCTUATION.get(text, TokenCategory.VALUE)
