"""Selector, identifier and block enumeration over a token sequence.

These helpers re-read tokens without parsing declarations, so they keep
duplicates that the parser would merge.
"""

from __future__ import annotations

from typing import Sequence

from cssmap.model.rule import Rule
from cssmap.model.token import Token, TokenCategory

__all__ = ["rules", "names", "block_count"]


def rules(tokens: Sequence[Token]) -> list[Rule]:
    """Return one Rule per block, in source order, including duplicates.

    Selector fragments before a ``{`` are joined with a single space, so
    ``div .item {`` yields ``Rule("div .item")``.
    """
    result: list[Rule] = []
    fragments: list[str] = []
    prefix = ""
    in_block = False
    prev: TokenCategory | None = None

    for token in tokens:
        category = token.category
        if category is TokenCategory.BLOCK_START:
            result.append(Rule(" ".join(fragments)))
            fragments = []
            in_block = True
        elif category is TokenCategory.BLOCK_END:
            in_block = False
        elif in_block:
            pass
        elif category is TokenCategory.SELECTOR:
            prefix = token.text
        elif category is TokenCategory.VALUE:
            if prev is TokenCategory.SELECTOR:
                fragments.append(prefix + token.text)
            elif prev is TokenCategory.STYLE_SEPARATOR and fragments:
                fragments[-1] += ":" + token.text
            else:
                fragments.append(token.text)
        prev = category

    return result


def names(tokens: Sequence[Token]) -> list[str]:
    """Return every class, id and element identifier, including duplicates.

    ``.``/``#`` followed by a name yields ``.name``/``#name``; a name right
    after ``}`` yields a bare tag name. The first token of the input is never
    a bare name on its own.
    """
    result: list[str] = []
    prev: Token | None = None

    for token in tokens:
        if prev is not None:
            if prev.category is TokenCategory.SELECTOR:
                result.append(prev.text + token.text)
            elif (
                prev.category is TokenCategory.BLOCK_END
                and token.category is not TokenCategory.SELECTOR
            ):
                result.append(token.text)
        prev = token

    return result


def block_count(tokens: Sequence[Token]) -> int:
    """Number of ``{`` tokens."""
    return sum(1 for token in tokens if token.category is TokenCategory.BLOCK_START)
