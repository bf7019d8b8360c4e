"""Parser error types."""

from __future__ import annotations

from cssmap.model.rule import Stylesheet


class ParseError(Exception):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)


class CSSSyntaxError(ParseError):
    """Malformed rule block syntax. Aborts the parse pass.

    ``stylesheet`` holds the rules completed before the failure; it is
    meant for diagnostics only.
    """

    def __init__(
        self, message: str, line: int, stylesheet: Stylesheet | None = None
    ):
        self.reason = message
        self.stylesheet: Stylesheet = stylesheet if stylesheet is not None else {}
        super().__init__(f"line {line}: {message}", line=line)
