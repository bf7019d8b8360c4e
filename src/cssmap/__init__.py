"""cssmap - parse a CSS subset into a selector -> declarations mapping."""

from cssmap.config import ParserConfig
from cssmap.extract import (
    block_count,
    comments,
    flatten_styles,
    licenses,
    names,
    rules,
    strip_comments,
)
from cssmap.lexer import classify, tokenize
from cssmap.model import Rule, RuleType, Stylesheet, Token, TokenCategory
from cssmap.parser import CSSSyntaxError, ParseError, parse, parse_file, unmarshal
from cssmap.styles import (
    InvalidStyleValueError,
    Style,
    StyleRegistry,
    UnknownStyleError,
    css_style,
    default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "ParserConfig",
    "block_count",
    "comments",
    "flatten_styles",
    "licenses",
    "names",
    "rules",
    "strip_comments",
    "classify",
    "tokenize",
    "Rule",
    "RuleType",
    "Stylesheet",
    "Token",
    "TokenCategory",
    "CSSSyntaxError",
    "ParseError",
    "parse",
    "parse_file",
    "unmarshal",
    "InvalidStyleValueError",
    "Style",
    "StyleRegistry",
    "UnknownStyleError",
    "css_style",
    "default_registry",
]
