"""Block parser: a finite state machine over the token stream.

States and the tokens they accept::

    AWAITING_SELECTOR  start of input, or after "}"
    SELECTOR           after a selector name           -> "{" opens a block
    SELECTOR_PREFIX    after "." or "#"                -> next value is "<prefix><name>"
    PSEUDO_CLASS       after ":" outside a block       -> next value is ":<name>"
    IN_BLOCK           after "{" or ";"                -> next value is a property name
    PROPERTY           after a property name           -> expects ":"; another name is a selector
    AWAITING_VALUE     after ":" inside a block        -> next value is the property value
    VALUE              after a property value          -> expects ";" or "}"; another value
                                                          continues this one after a space

Selectors that appear in several blocks are merged into one entry. The
current block's declarations win; earlier blocks only fill in properties
the current block does not declare.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from cssmap.model.rule import Rule, Stylesheet
from cssmap.model.token import Token, TokenCategory
from cssmap.parser.errors import CSSSyntaxError

__all__ = ["ParserState", "BlockParser", "parse"]

logger = logging.getLogger(__name__)

INVALID_SYNTAX = "invalid syntax"
MISSING_RULE_IDENTIFIER = "block is missing rule identifier"
NESTED_BLOCK = "nested blocks are not supported"
EXPECTED_STYLE = "expected style before semicolon"
UNOPENED_BLOCK = "rule block ends without a beginning"


class ParserState(Enum):
    """Position of the parser within the rule/block grammar."""

    AWAITING_SELECTOR = "awaiting_selector"
    SELECTOR = "selector"
    SELECTOR_PREFIX = "selector_prefix"
    PSEUDO_CLASS = "pseudo_class"
    IN_BLOCK = "in_block"
    PROPERTY = "property"
    AWAITING_VALUE = "awaiting_value"
    VALUE = "value"

    @property
    def in_block(self) -> bool:
        return self in _BLOCK_STATES


_BLOCK_STATES = frozenset({
    ParserState.IN_BLOCK,
    ParserState.PROPERTY,
    ParserState.AWAITING_VALUE,
    ParserState.VALUE,
})


class BlockParser:
    """Single forward pass over *tokens* producing a :data:`Stylesheet`.

    The token sequence is never modified; a cursor tracks the next token.
    The first syntax error aborts the pass.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.position = 0
        self.state = ParserState.AWAITING_SELECTOR
        self.stylesheet: Stylesheet = {}

        # Current block.
        self._rule: list[str] = []
        self._prefix = ""
        self._pseudo = ""
        self._styles: dict[str, str] = {}
        self._style = ""
        self._value = ""

    def parse(self) -> Stylesheet:
        """Consume every remaining token and return the merged stylesheet."""
        while self.position < len(self.tokens):
            token = self.tokens[self.position]
            self.position += 1
            self.state = self.step(token)

        if self.state.in_block:
            logger.warning(
                "unclosed block at end of input, dropping %s", self._rule
            )
        return self.stylesheet

    def step(self, token: Token) -> ParserState:
        """Apply one token to the machine and return the next state."""
        category = token.category
        if category is TokenCategory.VALUE:
            return self._on_value(token)
        if category is TokenCategory.SELECTOR:
            return self._on_selector_prefix(token)
        if category is TokenCategory.BLOCK_START:
            return self._on_block_start(token)
        if category is TokenCategory.STYLE_SEPARATOR:
            return self._on_style_separator(token)
        if category is TokenCategory.STATEMENT_END:
            return self._on_statement_end(token)
        return self._on_block_end(token)

    # ---- transitions ----

    def _on_value(self, token: Token) -> ParserState:
        state = self.state
        text = token.text

        if state in (ParserState.AWAITING_SELECTOR, ParserState.SELECTOR):
            self._add_selector(text)
        elif state is ParserState.SELECTOR_PREFIX:
            self._add_selector(self._prefix + text)
        elif state is ParserState.PSEUDO_CLASS:
            if self._rule:
                self._rule[-1] += self._pseudo + text
            else:
                self._rule.append(self._pseudo + text)
        elif state is ParserState.IN_BLOCK:
            self._style = text
            return ParserState.PROPERTY
        elif state is ParserState.PROPERTY:
            # a second name before ":" joins the block's selectors
            self._add_selector(text)
            return ParserState.PROPERTY
        elif state is ParserState.AWAITING_VALUE:
            self._value += text
            return ParserState.VALUE
        else:
            # value continued on the next line
            self._value += " " + text
            return ParserState.VALUE

        return ParserState.SELECTOR if self._rule else ParserState.AWAITING_SELECTOR

    def _on_selector_prefix(self, token: Token) -> ParserState:
        if self.state.in_block or self.state is ParserState.PSEUDO_CLASS:
            raise self._error(INVALID_SYNTAX, token)
        self._prefix = token.text
        return ParserState.SELECTOR_PREFIX

    def _on_block_start(self, token: Token) -> ParserState:
        if self.state.in_block:
            raise self._error(NESTED_BLOCK, token)
        if self.state is not ParserState.SELECTOR:
            raise self._error(MISSING_RULE_IDENTIFIER, token)
        return ParserState.IN_BLOCK

    def _on_style_separator(self, token: Token) -> ParserState:
        state = self.state
        if state in (ParserState.AWAITING_SELECTOR, ParserState.SELECTOR):
            self._pseudo = ":"
            return ParserState.PSEUDO_CLASS
        if state is ParserState.PSEUDO_CLASS and self._pseudo == ":":
            self._pseudo = "::"
            return ParserState.PSEUDO_CLASS
        if state.in_block:
            # A colon inside a value (e.g. "url(http://...)") splits the
            # value token; keep it so the pieces join back up.
            if self._value:
                self._value += ":"
            return ParserState.AWAITING_VALUE
        raise self._error(INVALID_SYNTAX, token)

    def _on_statement_end(self, token: Token) -> ParserState:
        if self.state is not ParserState.VALUE or not self._style or not self._value:
            raise self._error(EXPECTED_STYLE, token)
        self._commit_declaration()
        return ParserState.IN_BLOCK

    def _on_block_end(self, token: Token) -> ParserState:
        if not self.state.in_block:
            raise self._error(UNOPENED_BLOCK, token)
        if self.state is ParserState.VALUE and self._style and self._value:
            # Last declaration of a block may omit its semicolon.
            self._commit_declaration()
        self._close_block()
        return ParserState.AWAITING_SELECTOR

    # ---- helpers ----

    def _add_selector(self, name: str) -> None:
        name = name.rstrip(",")
        if name:
            self._rule.append(name)

    def _commit_declaration(self) -> None:
        self._styles[self._style] = self._value
        self._style = ""
        self._value = ""

    def _close_block(self) -> None:
        for name in self._rule:
            rule = Rule(name)
            previous = self.stylesheet.get(rule)
            if previous is None:
                merged = dict(self._styles)
            else:
                logger.debug("merging repeated selector %r", name)
                merged = dict(previous)
                merged.update(self._styles)
            self.stylesheet[rule] = merged
        logger.debug(
            "closed block for %s with %d declaration(s)", self._rule, len(self._styles)
        )

        self._rule = []
        self._prefix = ""
        self._pseudo = ""
        self._styles = {}
        self._style = ""
        self._value = ""

    def _error(self, message: str, token: Token) -> CSSSyntaxError:
        logger.debug("syntax error at line %d near %r: %s", token.line, token.text, message)
        return CSSSyntaxError(message, line=token.line, stylesheet=self.stylesheet)


def parse(tokens: Sequence[Token]) -> Stylesheet:
    """Parse a token sequence into a stylesheet.

    Raises :class:`CSSSyntaxError` on the first malformed construct; the
    rules completed so far are available on ``exc.stylesheet``.
    """
    return BlockParser(tokens).parse()
