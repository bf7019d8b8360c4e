"""Whole-document entry points: text or file in, stylesheet out."""

from __future__ import annotations

import logging
from pathlib import Path

from cssmap.config import ParserConfig
from cssmap.extract.comments import strip_comments
from cssmap.lexer.tokenizer import tokenize
from cssmap.model.rule import Stylesheet
from cssmap.parser.machine import parse

__all__ = ["unmarshal", "parse_file"]

logger = logging.getLogger(__name__)


def unmarshal(data: bytes | str, config: ParserConfig | None = None) -> Stylesheet:
    """Parse stylesheet text into a mapping of Rule -> {property: value}.

    Comments are removed before tokenizing unless ``config.strip_comments``
    is off. Raises :class:`~cssmap.parser.errors.CSSSyntaxError` on
    malformed input.
    """
    config = config or ParserConfig()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode(config.encoding)
    if config.strip_comments:
        data = strip_comments(data)
    stylesheet = parse(tokenize(data))
    logger.debug("parsed %d rule(s)", len(stylesheet))
    return stylesheet


def parse_file(path: str | Path, config: ParserConfig | None = None) -> Stylesheet:
    """Read and parse a stylesheet file."""
    config = config or ParserConfig()
    return unmarshal(Path(path).read_bytes(), config)
