"""Tokenizer: turn stylesheet text into classified tokens.

Scanning has two identifier modes:

    selector/property mode   ends on whitespace . # : ; { }
    value mode               ends on newline, tab, : ; { }

Value mode applies to the single token that follows a ``:``, so a
declaration such as ``border: 1px solid black;`` yields one VALUE token
``1px solid black``. There is no notion of strings, escapes or comments.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from cssmap.lexer.classifier import PUNCTUATION, classify
from cssmap.model.token import Token, TokenCategory

__all__ = ["Tokenizer", "tokenize"]

logger = logging.getLogger(__name__)

RETURNS = re.compile("\r\n|\f|\r")

_WHITESPACE = frozenset(" \t\n")
_IDENT_STOP = frozenset(" \t\n.#:;{}")
_VALUE_STOP = frozenset("\t\n:;{}")
_SELECTOR_PREFIXES = frozenset(".#")


class Tokenizer:
    """Iterator over the tokens of a stylesheet.

    Not resumable: create a new Tokenizer to scan the same text again.
    """

    def __init__(self, data: bytes | str, encoding: str = "utf-8") -> None:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode(encoding)
        self.source = RETURNS.sub("\n", data)
        self.index = 0
        self.line = 1
        self._value_mode = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Scan the next token, or return None at end of input."""
        self._skip_whitespace()
        if self.index >= len(self.source):
            return None

        line = self.line
        current = self.source[self.index]
        if current in PUNCTUATION and not (
            self._value_mode and current in _SELECTOR_PREFIXES
        ):
            text = current
            self.index += 1
        else:
            text = self._scan_identifier()

        category = classify(text)
        self._value_mode = category is TokenCategory.STYLE_SEPARATOR
        return Token(text=text, category=category, line=line)

    def _skip_whitespace(self) -> None:
        while self.index < len(self.source) and self.source[self.index] in _WHITESPACE:
            if self.source[self.index] == "\n":
                self.line += 1
            self.index += 1

    def _scan_identifier(self) -> str:
        stops = _VALUE_STOP if self._value_mode else _IDENT_STOP
        start = self.index
        while self.index < len(self.source) and self.source[self.index] not in stops:
            self.index += 1
        # Value mode keeps inner spaces but not the ones before the terminator.
        return self.source[start:self.index].rstrip(" ")


def tokenize(data: bytes | str, encoding: str = "utf-8") -> list[Token]:
    """Tokenize *data* completely. Never fails; empty input gives an empty list."""
    tokens = list(Tokenizer(data, encoding=encoding))
    logger.debug("tokenized %d token(s)", len(tokens))
    return tokens
